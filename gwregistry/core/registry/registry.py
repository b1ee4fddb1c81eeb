# gwregistry/core/registry/registry.py
"""
Registry: gateway and device records plus their bindings.

The registry owns the records; the BindingIndex owns the relation.
All state lives on one Registry instance, created once per process and
passed by reference to whatever transport serves it.

Every public operation runs inside a single re-entrant lock, so compound
updates (for example rebinding a gateway's device list) look atomic to
concurrent callers.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Dict, Iterable, List, Optional

from gwregistry.config.modules import BindingConfig
from gwregistry.core.binding import BindingIndex
from gwregistry.core.errors import RegistryError, codes

from .ids import UidGenerator, new_serial
from .models import (
    UNSET,
    BindFailure,
    BindResult,
    Device,
    DeviceInput,
    DeviceStatus,
    DeviceSummary,
    DeviceUpdate,
    Gateway,
    GatewayDetail,
    GatewayInput,
    GatewaySummary,
    GatewayUpdate,
)


logger = logging.getLogger(__name__)

# signed int32 or unsigned IPv4
IP_MIN = -(2 ** 31)
IP_MAX = 2 ** 32 - 1


# ---------------------------
# Field checks
# ---------------------------

def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_name(name: Any) -> str:
    if not name or not isinstance(name, str):
        raise RegistryError.validation("Gateway's name not set", details={"field": "name", "value": name})
    return name


def _check_ip(ip: Any) -> int:
    if not _is_int(ip) or not IP_MIN <= ip <= IP_MAX:
        raise RegistryError.validation("Invalid IP", details={"field": "ip", "value": ip})
    return ip


def _check_vendor(vendor: Any) -> str:
    if not vendor or not isinstance(vendor, str):
        raise RegistryError.validation("Vendor not set", details={"field": "vendor", "value": vendor})
    return vendor


def _check_status(status: Any) -> DeviceStatus:
    if isinstance(status, DeviceStatus):
        return status
    if not status or not isinstance(status, str):
        raise RegistryError.validation("Status not set", details={"field": "status", "value": status})
    try:
        return DeviceStatus(status)
    except ValueError:
        raise RegistryError.validation(
            f"Unknown status '{status}'",
            details={"field": "status", "value": status, "allowed": [s.value for s in DeviceStatus]},
        ) from None


def _check_serial(serial: Any) -> str:
    if not isinstance(serial, str):
        raise RegistryError.validation("Gateway serial must be a string", details={"field": "serial", "value": serial})
    return serial


def _check_uid(uid: Any) -> int:
    if not _is_int(uid) or uid <= 0:
        raise RegistryError.validation(
            f"Wrong device uid '{uid}'",
            error_code=codes.INVALID_DEVICE_UID,
            details={"field": "uid", "value": uid},
        )
    return uid


# ---------------------------
# Registry
# ---------------------------

class Registry:
    """
    In-memory gateway/device registry.

    Usage:
    ```python
    registry = Registry()
    uid = registry.upsert_device({"vendor": "acme", "status": "online"})
    serial = registry.upsert_gateway({"name": "g1", "ip": 16909060, "devices": [uid]})
    registry.get_gateway(serial).devices   # [uid]
    ```
    """

    def __init__(
        self,
        config: Optional[BindingConfig] = None,
        *,
        index: Optional[BindingIndex] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config or BindingConfig.default()
        self._index = index if index is not None else BindingIndex(self.config.max_devices_per_gateway)
        self._gateways: Dict[str, Gateway] = {}
        self._devices: Dict[int, Device] = {}
        self._uids = UidGenerator(self.config.uid_start)
        self._clock = clock
        self._lock = threading.RLock()

    @property
    def index(self) -> BindingIndex:
        return self._index

    # ---- gateways ----

    def list_gateways(self) -> List[GatewaySummary]:
        """Every gateway as (serial, name), in insertion order."""
        with self._lock:
            return [GatewaySummary(g.serial, g.name) for g in self._gateways.values()]

    def get_gateway(self, serial: str) -> Optional[GatewayDetail]:
        """Gateway with its live device list, or None if unknown."""
        with self._lock:
            gateway = self._gateways.get(serial)
            if gateway is None:
                return None
            return GatewayDetail(
                serial=gateway.serial,
                name=gateway.name,
                ip=gateway.ip,
                devices=self._index.devices_of(serial),
            )

    def upsert_gateway(self, update: GatewayInput) -> str:
        """
        Create or modify a gateway.

        If `devices` is given every uid must name an existing device;
        on update the binding set is replaced wholesale.

        Binds run one by one and are not rolled back: a CapacityError
        part way through leaves the earlier uids bound.

        Returns:
            The gateway serial.
        """
        if not isinstance(update, GatewayUpdate):
            update = GatewayUpdate.from_mapping(update)

        with self._lock:
            devices: Optional[List[int]] = None
            if update.is_set("devices"):
                devices = self._check_known_devices(update.devices)

            serial = update.serial
            if serial is not UNSET:
                serial = _check_serial(serial)

            if serial is UNSET or serial not in self._gateways:
                name = _check_name(update.name)
                ip = _check_ip(update.ip)
                serial = serial or new_serial()

                self._gateways[serial] = Gateway(serial=serial, name=name, ip=ip)
                logger.debug("Created gateway %s", serial)

                for device in devices or ():
                    self._index.bind(serial, device)
            else:
                gateway = self._gateways[serial]
                if update.is_set("name"):
                    name = _check_name(update.name)
                else:
                    name = gateway.name
                if update.is_set("ip"):
                    ip = _check_ip(update.ip)
                else:
                    ip = gateway.ip
                gateway.name = name
                gateway.ip = ip

                if devices is not None:
                    for device in self._index.devices_of(serial):
                        self._index.unbind(serial, device)
                    for device in devices:
                        self._index.bind(serial, device)

            return serial

    def delete_gateway(self, serial: str) -> None:
        """Unbind and drop the gateway; no-op if unknown."""
        with self._lock:
            if serial not in self._gateways:
                return
            for device in self._index.devices_of(serial):
                self._index.unbind(serial, device)
            del self._gateways[serial]
            logger.debug("Deleted gateway %s", serial)

    # ---- devices ----

    def list_devices(self, serial: Optional[str] = None) -> Optional[List[DeviceSummary]]:
        """
        All devices, or the devices bound to one gateway.

        Returns None when serial names no gateway.
        """
        with self._lock:
            if serial is None:
                return [DeviceSummary(d.uid, d.vendor) for d in self._devices.values()]

            if serial not in self._gateways:
                return None

            result = []
            for uid in self._index.devices_of(serial):
                device = self._devices.get(uid)
                if device is not None:
                    result.append(DeviceSummary(device.uid, device.vendor))
            return result

    def get_device(self, uid: int) -> Optional[Device]:
        with self._lock:
            device = self._devices.get(uid)
            if device is None:
                return None
            return Device(
                uid=device.uid,
                vendor=device.vendor,
                status=device.status,
                created_at=device.created_at,
            )

    def upsert_device(self, update: DeviceInput) -> int:
        """
        Create or modify a device.

        uid and created_at are never overwritten on update.

        Returns:
            The device uid.
        """
        if not isinstance(update, DeviceUpdate):
            update = DeviceUpdate.from_mapping(update)

        with self._lock:
            uid = update.uid
            if uid is not UNSET:
                uid = _check_uid(uid)

            if uid is UNSET or uid not in self._devices:
                vendor = _check_vendor(update.vendor)
                status = _check_status(update.status)
                if uid is UNSET:
                    uid = self._uids.next(self._devices)

                self._devices[uid] = Device(
                    uid=uid,
                    vendor=vendor,
                    status=status,
                    created_at=self._clock(),
                )
                logger.debug("Created device %s", uid)
            else:
                device = self._devices[uid]
                vendor = _check_vendor(update.vendor) if update.is_set("vendor") else device.vendor
                status = _check_status(update.status) if update.is_set("status") else device.status
                device.vendor = vendor
                device.status = status

            return uid

    def delete_device(self, uid: int) -> None:
        """Unbind the device everywhere and drop it; no-op if unknown."""
        with self._lock:
            if uid not in self._devices:
                return
            for gateway in self._index.gateways_of(uid):
                self._index.unbind(gateway, uid)
            del self._devices[uid]
            logger.debug("Deleted device %s", uid)

    # ---- bindings ----

    def bind_devices(self, serial: str, uids: Iterable[int]) -> BindResult:
        """
        Bind each uid to the gateway, skipping the ones that fail.

        Raises:
            NotFoundError: gateway does not exist (nothing is bound)
        """
        with self._lock:
            self._require_gateway(serial)

            result = BindResult()
            for uid in uids:
                try:
                    self._index.bind(serial, uid)
                except RegistryError as e:
                    logger.warning("Skipping bind of %r to gateway %s: %s", uid, serial, e)
                    result.failed.append(BindFailure(uid=uid, error_code=e.error_code, message=e.message))
                    continue
                result.bound.append(uid)
            return result

    def unbind_devices(self, serial: str, uids: Iterable[int]) -> None:
        """
        Unbind each uid from the gateway.

        Raises:
            NotFoundError: gateway does not exist
        """
        with self._lock:
            self._require_gateway(serial)
            for uid in uids:
                self._index.unbind(serial, uid)

    # ---- helpers ----

    def _require_gateway(self, serial: str) -> Gateway:
        gateway = self._gateways.get(serial)
        if gateway is None:
            raise RegistryError.not_found(
                f"Gateway {serial} does not exist.",
                details={"serial": serial},
            )
        return gateway

    def _check_known_devices(self, devices: Any) -> List[int]:
        if isinstance(devices, (str, bytes)) or not isinstance(devices, (list, tuple)):
            raise RegistryError.validation(
                "Gateway devices must be a list of device uids",
                details={"field": "devices", "value": devices},
            )
        for device in devices:
            if not _is_int(device) or device not in self._devices:
                raise RegistryError.validation(
                    f"Wrong device uid: {device}",
                    error_code=codes.UNKNOWN_DEVICE,
                    details={"field": "devices", "device": device},
                )
        return list(devices)

    def __repr__(self) -> str:
        return (
            f"Registry("
            f"gateways={len(self._gateways)}, "
            f"devices={len(self._devices)}, "
            f"capacity={self._index.capacity})"
        )


__all__ = [
    "Registry",
    "IP_MIN",
    "IP_MAX",
]
