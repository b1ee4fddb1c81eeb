# gwregistry/core/binding/index.py
"""
Binding index: the gateway <-> device relation.

Two tables are kept mutually consistent at all times:
- gateway serial -> ordered set of device uids
- device uid -> ordered set of gateway serials

Ordered sets are insertion-ordered dicts with None values.
The index knows identifiers only, never record contents.
"""

from __future__ import annotations

from typing import Any, Dict, List

from gwregistry.core.errors import RegistryError, codes


DEFAULT_CAPACITY = 10


def check_device_uid(device: Any) -> int:
    """Return device if it is a positive int, else raise ValidationError."""
    if isinstance(device, bool) or not isinstance(device, int) or device <= 0:
        raise RegistryError.validation(
            f"Wrong device uid '{device}'",
            error_code=codes.INVALID_DEVICE_UID,
            details={"device": device},
        )
    return device


class BindingIndex:
    """
    Bidirectional many-to-many relation with a per-gateway capacity.

    Usage:
    ```python
    index = BindingIndex(capacity=10)
    index.bind("gw-1", 42)
    index.devices_of("gw-1")   # [42]
    index.gateways_of(42)      # ["gw-1"]
    ```
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError("capacity must be a positive int")
        self.capacity = capacity
        self._gateways: Dict[str, Dict[int, None]] = {}
        self._devices: Dict[int, Dict[str, None]] = {}

    def bind(self, gateway: str, device: int) -> None:
        """
        Associate device with gateway.

        A full gateway refuses every bind, including a pair it already holds.
        Otherwise binding an already bound pair is a no-op and does not count
        twice.

        Raises:
            ValidationError: device is not a positive int
            CapacityError: gateway already holds `capacity` devices
        """
        check_device_uid(device)

        bound = self._gateways.get(gateway, {})
        if len(bound) >= self.capacity:
            raise RegistryError.capacity(
                "Maximum device count exceeded",
                details={"gateway": gateway, "device": device, "capacity": self.capacity},
            )
        if device in bound:
            return

        self._gateways.setdefault(gateway, {})[device] = None
        self._devices.setdefault(device, {})[gateway] = None

    def unbind(self, gateway: str, device: int) -> None:
        """Remove the association; silent no-op if either side is unknown."""
        check_device_uid(device)

        if gateway not in self._gateways or device not in self._devices:
            return

        self._discard(self._gateways, gateway, device)
        self._discard(self._devices, device, gateway)

    def devices_of(self, gateway: str) -> List[int]:
        """Device uids bound to gateway, in binding order."""
        return list(self._gateways.get(gateway, ()))

    def gateways_of(self, device: int) -> List[str]:
        """Gateway serials bound to device, in binding order."""
        return list(self._devices.get(device, ()))

    def is_bound(self, gateway: str, device: int) -> bool:
        return device in self._gateways.get(gateway, ())

    def count(self, gateway: str) -> int:
        return len(self._gateways.get(gateway, ()))

    @staticmethod
    def _discard(table: Dict[Any, Dict[Any, None]], key: Any, member: Any) -> None:
        members = table[key]
        members.pop(member, None)
        if not members:
            del table[key]

    def __repr__(self) -> str:
        return (
            f"BindingIndex("
            f"capacity={self.capacity}, "
            f"gateways={len(self._gateways)}, "
            f"devices={len(self._devices)})"
        )


__all__ = [
    "BindingIndex",
    "DEFAULT_CAPACITY",
    "check_device_uid",
]
