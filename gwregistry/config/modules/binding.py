# gwregistry/config/modules/binding.py
"""
Binding Module Configuration

Capacity and identifier policy for the gateway/device relation.
"""

from dataclasses import dataclass
from .base import ModuleConfig


@dataclass(frozen=True)
class BindingConfig(ModuleConfig):
    """
    Binding configuration.

    max_devices_per_gateway: Distinct devices one gateway may hold
    uid_start: First value handed out by the device uid generator
    """

    max_devices_per_gateway: int = 10
    uid_start: int = 1

    @classmethod
    def default(cls) -> "BindingConfig":
        return cls()
