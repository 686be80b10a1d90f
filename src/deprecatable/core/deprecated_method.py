"""DeprecatedMethod: the record of one deprecated method and its callers.

Every call to a deprecated method ends up in ``log_invocation`` with the
caller's file and line. The record keeps one CallSite per distinct location,
counts invocations per site, and hands the first ``alert_frequency``
invocations from each site to the alerter.
"""

import inspect
import itertools
import logging
import os
import threading
from typing import Any, Dict, List, Optional

from deprecatable.core.call_site import CallSite
from deprecatable.core.constants import DEPRECATED_ALIAS_PREFIX

logger = logging.getLogger(__name__)

_handles = itertools.count(1)


def owner_name(owner: Any) -> str:
    """Return a dotted name for a class, a module or a plain string."""
    if isinstance(owner, str):
        return owner
    if inspect.ismodule(owner):
        return owner.__name__
    qualname = getattr(owner, "__qualname__", None) or getattr(owner, "__name__", None)
    if qualname is None:
        return repr(owner)
    module = getattr(owner, "__module__", None)
    if module and module != "builtins":
        return f"{module}.{qualname}"
    return qualname


class DeprecatedMethod:
    """A method marked as deprecated, with the call sites that invoked it.

    Attributes:
        owner: Class, module or name owning the method.
        method: Name of the deprecated method.
        file: Absolute path of the file where the deprecation was declared.
        line_number: 1-indexed line of the declaration.
        message: Optional text shown with every alert.
        removal_date: Optional date after which the method goes away.
        removal_version: Optional version in which the method goes away.
        deprecated_method_name: Name the original callable is kept under.
        handle: Unique identifier of this record.
    """

    def __init__(
        self,
        owner: Any,
        method: str,
        file: str,
        line_number: Any,
        message: Optional[str] = None,
        removal_date: Optional[str] = None,
        removal_version: Optional[str] = None,
        *,
        options: Optional[Any] = None,
        alerter: Optional[Any] = None,
    ):
        """Create the record.

        Args:
            owner: Class, module or name owning the method.
            method: Name of the deprecated method.
            file: File where the deprecation was declared; made absolute.
            line_number: Line of the declaration; coerced to int.
            message: Optional developer message.
            removal_date: Optional removal date.
            removal_version: Optional removal version.
            options: Options to consult. Defaults to the process-wide options,
                looked up on every invocation.
            alerter: Alerter to notify. Defaults to the process-wide alerter,
                looked up on every alert.
        """
        self.owner = owner
        self.method = str(method)
        self.file = os.path.abspath(file)
        self.line_number = int(float(line_number))
        self.message = message
        self.removal_date = removal_date
        self.removal_version = removal_version
        self.deprecated_method_name = f"{DEPRECATED_ALIAS_PREFIX}{self.method}"
        self.handle = next(_handles)

        self._options = options
        self._alerter = alerter
        self._call_sites: Dict[str, CallSite] = {}
        self._lock = threading.Lock()

    @property
    def qualified_name(self) -> str:
        return f"{owner_name(self.owner)}.{self.method}"

    def __str__(self) -> str:
        return f"{self.qualified_name} defined at {self.file}:{self.line_number}"

    def __repr__(self) -> str:
        return f"DeprecatedMethod({self.qualified_name!r}, handle={self.handle})"

    @property
    def options(self):
        if self._options is not None:
            return self._options
        from deprecatable.state import get_options

        return get_options()

    @property
    def alerter(self):
        if self._alerter is not None:
            return self._alerter
        from deprecatable.state import get_alerter

        return get_alerter()

    def log_invocation(self, file: str, line_number: int) -> None:
        """Record one invocation from ``file:line_number`` and maybe alert.

        Creating the call site and bumping its count happen atomically, so
        each invocation sees its own count and exactly the first
        ``alert_frequency`` invocations from a site are alerted.
        """
        with self._lock:
            call_site = self._call_site_for(file, line_number)
            count = call_site.increment_invocation_count()
        self._alert_for_count(call_site, count)

    def alert(self, call_site: CallSite) -> None:
        """Alert for ``call_site`` if its invocation count is within the limit."""
        self._alert_for_count(call_site, call_site.invocation_count)

    def _alert_for_count(self, call_site: CallSite, count: int) -> None:
        if count <= self.options.alert_frequency:
            self.alerter.alert(self, call_site)

    @property
    def call_sites(self) -> List[CallSite]:
        with self._lock:
            return list(self._call_sites.values())

    def invocation_count(self) -> int:
        """Total invocations across all call sites."""
        return sum(cs.invocation_count for cs in self.call_sites)

    def call_site_count(self) -> int:
        """Number of distinct call sites."""
        with self._lock:
            return len(self._call_sites)

    def _call_site_for(self, file: str, line_number: int) -> CallSite:
        key = CallSite.gen_key(file, line_number)
        call_site = self._call_sites.get(key)
        if call_site is None:
            call_site = CallSite(
                file, line_number, self.options.caller_context_padding
            )
            self._call_sites[key] = call_site
            logger.debug("New call site for %s at %s", self.qualified_name, key)
        return call_site
