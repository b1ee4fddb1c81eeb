# gwregistry/core/errors/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import codes


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return "<unstringifiable>"


def _normalize_error_code(code: Any) -> str:
    """
    Keep error_code stable and finite.
    Unknown codes are downgraded so callers can switch on them safely.
    """
    c = _safe_str(code or codes.UNKNOWN).strip() or codes.UNKNOWN
    if c in codes.KNOWN_CODES:
        return c
    return codes.UNKNOWN


@dataclass(eq=False)
class RegistryError(Exception):
    """
    Base type for every domain failure raised by the registry.
    """
    message: str
    error_code: str = codes.UNKNOWN
    error_type: str = "REGISTRY_ERROR"  # VALIDATION_ERROR / CAPACITY_ERROR / NOT_FOUND
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.error_type,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    # -------- factories --------

    @classmethod
    def validation(
        cls,
        message: str,
        *,
        error_code: str = codes.INVALID_ARGUMENT,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ValidationError":
        return ValidationError(
            message=message,
            error_code=_normalize_error_code(error_code),
            details=details or {},
        )

    @classmethod
    def capacity(
        cls,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> "CapacityError":
        return CapacityError(
            message=message,
            details=details or {},
        )

    @classmethod
    def not_found(
        cls,
        message: str,
        *,
        error_code: str = codes.GATEWAY_NOT_FOUND,
        details: Optional[Dict[str, Any]] = None,
    ) -> "NotFoundError":
        return NotFoundError(
            message=message,
            error_code=_normalize_error_code(error_code),
            details=details or {},
        )


@dataclass(eq=False)
class ValidationError(RegistryError):
    """Malformed or missing field, or a reference to an unknown device."""
    error_code: str = codes.INVALID_ARGUMENT
    error_type: str = "VALIDATION_ERROR"


@dataclass(eq=False)
class CapacityError(RegistryError):
    """Gateway already holds the maximum number of bound devices."""
    error_code: str = codes.CAPACITY_EXCEEDED
    error_type: str = "CAPACITY_ERROR"


@dataclass(eq=False)
class NotFoundError(RegistryError):
    """Write operation targets a gateway that does not exist."""
    error_code: str = codes.GATEWAY_NOT_FOUND
    error_type: str = "NOT_FOUND"
