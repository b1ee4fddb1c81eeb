# gwregistry/core/registry/interfaces.py
"""
Registry capability interface

Transport components (the HTTP app, tests, embedders) depend on this
protocol rather than on the concrete Registry class.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from .models import (
    BindResult,
    Device,
    DeviceInput,
    DeviceSummary,
    GatewayDetail,
    GatewayInput,
    GatewaySummary,
)


class RegistryProvider(Protocol):
    """Operations a gateway/device registry exposes to its callers."""

    def list_gateways(self) -> List[GatewaySummary]:
        ...

    def get_gateway(self, serial: str) -> Optional[GatewayDetail]:
        ...

    def upsert_gateway(self, update: GatewayInput) -> str:
        ...

    def delete_gateway(self, serial: str) -> None:
        ...

    def list_devices(self, serial: Optional[str] = None) -> Optional[List[DeviceSummary]]:
        ...

    def get_device(self, uid: int) -> Optional[Device]:
        ...

    def upsert_device(self, update: DeviceInput) -> int:
        ...

    def delete_device(self, uid: int) -> None:
        ...

    def bind_devices(self, serial: str, uids: Iterable[int]) -> BindResult:
        ...

    def unbind_devices(self, serial: str, uids: Iterable[int]) -> None:
        ...
