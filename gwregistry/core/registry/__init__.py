# gwregistry/core/registry/__init__.py
"""
Gateway/device records and the operations over them.
"""

from .models import (
    UNSET,
    DeviceStatus,
    Gateway,
    Device,
    GatewaySummary,
    GatewayDetail,
    DeviceSummary,
    GatewayUpdate,
    DeviceUpdate,
    BindFailure,
    BindResult,
)
from .ids import UidGenerator, new_serial
from .interfaces import RegistryProvider
from .registry import Registry

__all__ = [
    "UNSET",
    "DeviceStatus",
    "Gateway",
    "Device",
    "GatewaySummary",
    "GatewayDetail",
    "DeviceSummary",
    "GatewayUpdate",
    "DeviceUpdate",
    "BindFailure",
    "BindResult",
    "UidGenerator",
    "new_serial",
    "RegistryProvider",
    "Registry",
]
