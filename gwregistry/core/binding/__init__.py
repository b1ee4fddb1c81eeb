# gwregistry/core/binding/__init__.py
"""
Gateway/device binding relation.
"""

from .index import BindingIndex, DEFAULT_CAPACITY, check_device_uid

__all__ = [
    "BindingIndex",
    "DEFAULT_CAPACITY",
    "check_device_uid",
]
