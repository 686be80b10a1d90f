"""Registry of every DeprecatedMethod in the process."""

import logging
import threading
from typing import Any, Dict, Iterator, List, Optional

from deprecatable.core.deprecated_method import DeprecatedMethod

logger = logging.getLogger(__name__)


class Registry:
    """Container of unique DeprecatedMethod instances.

    Records are keyed by their ``handle``, so the same record is only held
    once however often it is registered, while two records describing the
    same method are kept apart. Iteration follows registration order.

    Normally there is a single registry, reached via
    ``deprecatable.get_registry()``.
    """

    def __init__(self):
        self._records: Dict[int, DeprecatedMethod] = {}
        self._lock = threading.Lock()

    def register(self, deprecated_method: DeprecatedMethod) -> DeprecatedMethod:
        """Add a record if it is not already present.

        Returns:
            The record that was passed in.
        """
        with self._lock:
            if deprecated_method.handle not in self._records:
                self._records[deprecated_method.handle] = deprecated_method
                logger.debug("Registered %s", deprecated_method)
        return deprecated_method

    def deprecated_method(
        self,
        owner: Any,
        method: str,
        file: str,
        line_number: int,
        message: Optional[str] = None,
        removal_date: Optional[str] = None,
        removal_version: Optional[str] = None,
    ) -> DeprecatedMethod:
        """Create a DeprecatedMethod and register it."""
        return self.register(
            DeprecatedMethod(
                owner,
                method,
                file,
                line_number,
                message=message,
                removal_date=removal_date,
                removal_version=removal_version,
            )
        )

    def items(self) -> List[DeprecatedMethod]:
        with self._lock:
            return list(self._records.values())

    def size(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[DeprecatedMethod]:
        return iter(self.items())

    def __contains__(self, deprecated_method: object) -> bool:
        handle = getattr(deprecated_method, "handle", None)
        with self._lock:
            return self._records.get(handle) is deprecated_method
