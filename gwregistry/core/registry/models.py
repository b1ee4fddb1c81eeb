# gwregistry/core/registry/models.py
from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Mapping, Union

from gwregistry.core.errors import RegistryError


# =========================
# Field presence
# =========================

class _Unset:
    """Marker for a field that was not supplied at all."""

    _instance = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


class _Update:
    """Shared helpers for optional-field update structs."""

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not UNSET

    def present(self) -> Dict[str, Any]:
        """Supplied fields only."""
        return {f.name: getattr(self, f.name) for f in fields(self) if self.is_set(f.name)}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]):
        """
        Build an update from a loose mapping, keyed on presence.

        Unknown keys are rejected so typos never vanish silently.
        """
        if not isinstance(data, Mapping):
            raise RegistryError.validation(
                f"{cls.__name__} expects a mapping, got {type(data).__name__}"
            )
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise RegistryError.validation(
                f"Unknown field(s): {', '.join(map(str, unknown))}",
                details={"fields": unknown},
            )
        return cls(**dict(data))


# =========================
# Records
# =========================

class DeviceStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"


@dataclass
class Gateway:
    serial: str
    name: str
    ip: int

    def to_dict(self) -> Dict[str, Any]:
        return {"serial": self.serial, "name": self.name, "ip": self.ip}


@dataclass
class Device:
    """
    Device record.

    created_at is wall-clock epoch seconds, stamped once at creation.
    """
    uid: int
    vendor: str
    status: DeviceStatus
    created_at: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "uid": self.uid,
            "vendor": self.vendor,
            "status": self.status.value,
            "created_at": self.created_at,
        }


# =========================
# Read views
# =========================

@dataclass(frozen=True)
class GatewaySummary:
    serial: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"serial": self.serial, "name": self.name}


@dataclass(frozen=True)
class GatewayDetail:
    serial: str
    name: str
    ip: int
    devices: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "serial": self.serial,
            "name": self.name,
            "ip": self.ip,
            "devices": list(self.devices),
        }


@dataclass(frozen=True)
class DeviceSummary:
    uid: int
    vendor: str

    def to_dict(self) -> Dict[str, Any]:
        return {"uid": self.uid, "vendor": self.vendor}


# =========================
# Updates
# =========================

@dataclass
class GatewayUpdate(_Update):
    """
    Partial gateway input.

    A field left as UNSET is not touched. None for serial or devices
    counts as absent; None for name or ip is present and rejected.
    """
    serial: Any = UNSET
    name: Any = UNSET
    ip: Any = UNSET
    devices: Any = UNSET

    def __post_init__(self) -> None:
        if self.serial is None or self.serial == "":
            self.serial = UNSET
        if self.devices is None:
            self.devices = UNSET


@dataclass
class DeviceUpdate(_Update):
    """
    Partial device input.

    uid=None (or 0) counts as absent, matching "generate one for me".
    """
    uid: Any = UNSET
    vendor: Any = UNSET
    status: Any = UNSET

    def __post_init__(self) -> None:
        if self.uid is None or (self.uid == 0 and not isinstance(self.uid, bool)):
            self.uid = UNSET


GatewayInput = Union[GatewayUpdate, Mapping[str, Any]]
DeviceInput = Union[DeviceUpdate, Mapping[str, Any]]


# =========================
# Batch bind result
# =========================

@dataclass(frozen=True)
class BindFailure:
    uid: Any
    error_code: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {"uid": self.uid, "error_code": self.error_code, "message": self.message}


@dataclass
class BindResult:
    """
    Partial-success outcome of a batch bind.

    bound keeps attempt order; failed lists every uid that was skipped.
    """
    bound: List[int] = field(default_factory=list)
    failed: List[BindFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bound": list(self.bound),
            "failed": [f.to_dict() for f in self.failed],
        }


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
    "GatewayInput",
    "DeviceInput",
    "BindFailure",
    "BindResult",
]
