# gwregistry/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INVALID_ARGUMENT: Final[str] = "INVALID_ARGUMENT"

# validation
INVALID_DEVICE_UID: Final[str] = "INVALID_DEVICE_UID"
UNKNOWN_DEVICE: Final[str] = "UNKNOWN_DEVICE"

# binding
CAPACITY_EXCEEDED: Final[str] = "CAPACITY_EXCEEDED"

# lookup
GATEWAY_NOT_FOUND: Final[str] = "GATEWAY_NOT_FOUND"
DEVICE_NOT_FOUND: Final[str] = "DEVICE_NOT_FOUND"


# ---- semantic groups (internal helpers) ----

VALIDATION_CODES: Final[set[str]] = {
    INVALID_ARGUMENT,
    INVALID_DEVICE_UID,
    UNKNOWN_DEVICE,
}

NOT_FOUND_CODES: Final[set[str]] = {
    GATEWAY_NOT_FOUND,
    DEVICE_NOT_FOUND,
}

KNOWN_CODES: Final[set[str]] = {
    UNKNOWN,
    CAPACITY_EXCEEDED,
} | VALIDATION_CODES | NOT_FOUND_CODES
