"""Core short link registry."""

from .shortcode import ShortCodeGenerator
from .models import Entry
from .registry import Registry
from .exceptions import ShortlinkError, ValidationError, NotFoundError, InternalError

__all__ = [
    "ShortCodeGenerator",
    "Entry",
    "Registry",
    "ShortlinkError",
    "ValidationError",
    "NotFoundError",
    "InternalError",
]
