"""Resource bundle module."""

from .loader import ResourceBundleError, available_locales, load_resource_set

__all__ = ["ResourceBundleError", "available_locales", "load_resource_set"]
