"""Core tracking model: deprecated methods, call sites and their context."""

from .call_site import CallSite
from .call_site_context import CallSiteContext, extract_context
from .deprecated_method import DeprecatedMethod
from .registry import Registry

__all__ = [
    "CallSite",
    "CallSiteContext",
    "DeprecatedMethod",
    "Registry",
    "extract_context",
]
