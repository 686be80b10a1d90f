"""Mark methods and functions as deprecated.

Two forms are available. ``deprecate`` works on something already defined,
much like a class-level declaration:

    class Foo:
        def bar(self):
            ...

    deprecate(Foo, "bar", message="Use Foo.baz() instead")

``deprecated`` is the decorator form:

    class Foo:
        @deprecated(removal_version="2.0")
        def bar(self):
            ...

Either way the original callable is replaced by a wrapper that records the
caller's file and line on the DeprecatedMethod and then forwards the call
unchanged.
"""

import functools
import inspect
import logging
from typing import Any, Callable, Optional, Tuple, TypeVar

from deprecatable.at_exit import install_at_exit_hook
from deprecatable.core.deprecated_method import DeprecatedMethod, owner_name
from deprecatable.errors import MethodNotFoundError, OptionError
from deprecatable.state import get_registry
from deprecatable.util import location_of_caller

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


def _unwrap(member: Any, qualified: str) -> Tuple[Callable, Optional[type]]:
    """Split a class member into its function and the descriptor type to restore."""
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__, type(member)
    if callable(member) and not inspect.isclass(member):
        return member, None
    raise TypeError(f"Cannot deprecate {qualified}: {member!r} is not a function")


def _record_call(deprecated_method: DeprecatedMethod, file: str, line: int) -> None:
    """Log one invocation, keeping alerter failures away from the caller.

    Option errors still propagate: they come from misconfiguration, not
    from reporting.
    """
    try:
        deprecated_method.log_invocation(file, line)
    except OptionError:
        raise
    except Exception as e:
        logger.error(
            f"Failed to record call to {deprecated_method.qualified_name} "
            f"from {file}:{line}: {e}",
            exc_info=True,
        )


def _wrap(func: Callable, deprecated_method: DeprecatedMethod) -> Callable:
    # Plain def for coroutine functions too: the caller's frame is only on
    # the stack when the coroutine object is created, not when it first runs.
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        _record_call(deprecated_method, *location_of_caller())
        return func(*args, **kwargs)

    if inspect.iscoroutinefunction(func) and hasattr(inspect, "markcoroutinefunction"):
        inspect.markcoroutinefunction(wrapper)

    wrapper.__deprecation__ = deprecated_method  # type: ignore[attr-defined]
    return wrapper


def deprecate(
    owner: Any,
    method_name: str,
    message: Optional[str] = None,
    removal_date: Optional[str] = None,
    removal_version: Optional[str] = None,
) -> DeprecatedMethod:
    """Deprecate ``method_name`` on ``owner``.

    The original is kept on the owner as ``_deprecated_<method_name>`` and
    replaced by a tracking wrapper. Deprecating a method that is already
    wrapped returns its existing record.

    Args:
        owner: Class or module that defines the method.
        method_name: Name of the method or function to deprecate.
        message: Contextual message shown with alerts.
        removal_date: When the method will be removed.
        removal_version: Version in which the method will be removed.

    Returns:
        The DeprecatedMethod created to track this deprecation.

    Raises:
        MethodNotFoundError: If ``owner`` has no attribute ``method_name``.
        TypeError: If the attribute is not a function.
    """
    name = owner_name(owner)
    try:
        member = inspect.getattr_static(owner, method_name)
    except AttributeError:
        raise MethodNotFoundError(name, method_name) from None

    func, descriptor = _unwrap(member, f"{name}.{method_name}")
    existing = getattr(func, "__deprecation__", None)
    if isinstance(existing, DeprecatedMethod):
        logger.debug("%s is already deprecated", existing.qualified_name)
        return existing

    file, line = location_of_caller()
    deprecated_method = get_registry().deprecated_method(
        owner,
        method_name,
        file,
        line,
        message=message,
        removal_date=removal_date,
        removal_version=removal_version,
    )

    wrapper = _wrap(func, deprecated_method)
    setattr(owner, deprecated_method.deprecated_method_name, member)
    setattr(owner, method_name, descriptor(wrapper) if descriptor else wrapper)

    install_at_exit_hook()
    return deprecated_method


def deprecated(
    message: Optional[str] = None,
    removal_date: Optional[str] = None,
    removal_version: Optional[str] = None,
) -> Callable[[F], F]:
    """Decorator marking a function or method as deprecated.

    May be used bare (``@deprecated``) or with arguments. Works on plain
    functions, methods, and ``staticmethod``/``classmethod`` objects.

    Args:
        message: Contextual message shown with alerts.
        removal_date: When the function will be removed.
        removal_version: Version in which the function will be removed.

    Returns:
        A decorator that wraps the function with invocation tracking.

    Example:
        @deprecated("Use load_rows() instead", removal_version="3.0")
        def read_rows(path):
            ...
    """

    def decorator(target: F) -> F:
        func, descriptor = _unwrap(target, repr(target))

        qualname = getattr(func, "__qualname__", func.__name__)
        module = getattr(func, "__module__", None) or "__main__"
        parent = qualname.rpartition(".")[0]
        owner = f"{module}.{parent}" if parent else module

        code = getattr(func, "__code__", None)
        if code is not None:
            file, line = code.co_filename, code.co_firstlineno
        else:
            file, line = location_of_caller()

        deprecated_method = get_registry().deprecated_method(
            owner,
            func.__name__,
            file,
            line,
            message=message,
            removal_date=removal_date,
            removal_version=removal_version,
        )
        wrapper = _wrap(func, deprecated_method)

        install_at_exit_hook()
        return descriptor(wrapper) if descriptor else wrapper  # type: ignore

    if callable(message) or isinstance(message, (staticmethod, classmethod)):
        target, message = message, None
        return decorator(target)  # type: ignore[return-value]
    return decorator
