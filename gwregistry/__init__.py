# gwregistry/__init__.py
"""
gwregistry - In-memory gateway/device registry

Quick Start:
    >>> from gwregistry import Registry
    >>> registry = Registry()
    >>> uid = registry.upsert_device({"vendor": "acme", "status": "online"})
    >>> serial = registry.upsert_gateway({"name": "g1", "ip": 16909060, "devices": [uid]})
    >>> registry.get_gateway(serial).devices
    [1]

Serve it over HTTP:
    $ gwregistry serve --port 8000
"""

__version__ = "0.1.0"

# Public API
from .core.registry import (
    Registry,
    RegistryProvider,
    GatewayUpdate,
    DeviceUpdate,
    DeviceStatus,
    BindResult,
    UNSET,
)
from .core.binding import BindingIndex
from .core.errors import RegistryError, ValidationError, CapacityError, NotFoundError
from .config import RegistryHubConfig, BindingConfig, ServerConfig, load_config

__all__ = [
    "__version__",
    "Registry",
    "RegistryProvider",
    "GatewayUpdate",
    "DeviceUpdate",
    "DeviceStatus",
    "BindResult",
    "UNSET",
    "BindingIndex",
    "RegistryError",
    "ValidationError",
    "CapacityError",
    "NotFoundError",
    "RegistryHubConfig",
    "BindingConfig",
    "ServerConfig",
    "load_config",
]
