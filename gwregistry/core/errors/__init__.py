# gwregistry/core/errors/__init__.py
"""
Core error types for gwregistry.

This package defines the components responsible for:
- Representing errors
- Categorizing errors (stable codes)

No side effects on import.
"""

from . import codes
from .exceptions import RegistryError, ValidationError, CapacityError, NotFoundError

__all__ = [
    "codes",
    "RegistryError",
    "ValidationError",
    "CapacityError",
    "NotFoundError",
]
