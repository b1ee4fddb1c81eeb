# gwregistry/config/modules/__init__.py
"""
Module Configuration

Configuration for the binding relation and the HTTP server.
"""

from .base import ModuleConfig
from .binding import BindingConfig
from .server import ServerConfig

__all__ = [
    "ModuleConfig",
    "BindingConfig",
    "ServerConfig",
]
