# gwregistry/web/routes/api/gateways.py
"""
Gateway API endpoints
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from gwregistry.core.errors import RegistryError
from gwregistry.core.registry import RegistryProvider
from gwregistry.web.deps import get_registry
from gwregistry.web.schemas import DeviceUids, GatewayIn


router = APIRouter(prefix="/gateways", tags=["gateways"])


@router.get("")
def list_gateways(registry: RegistryProvider = Depends(get_registry)) -> List[Dict[str, Any]]:
    return [g.to_dict() for g in registry.list_gateways()]


@router.get("/{serial}")
def get_gateway(serial: str, registry: RegistryProvider = Depends(get_registry)) -> Dict[str, Any]:
    gateway = registry.get_gateway(serial)
    if gateway is None:
        raise RegistryError.not_found(f"Gateway {serial} does not exist.", details={"serial": serial})
    return gateway.to_dict()


@router.put("")
def put_gateway(body: GatewayIn, registry: RegistryProvider = Depends(get_registry)) -> Dict[str, Any]:
    serial = registry.upsert_gateway(body.model_dump(exclude_unset=True))
    return {"serial": serial}


@router.delete("/{serial}")
def delete_gateway(serial: str, registry: RegistryProvider = Depends(get_registry)) -> Dict[str, Any]:
    registry.delete_gateway(serial)
    return {"ok": True}


@router.post("/{serial}/bind")
def bind_devices(
    serial: str,
    body: DeviceUids,
    registry: RegistryProvider = Depends(get_registry),
) -> Dict[str, Any]:
    """Bind devices; uids that fail are listed under 'failed'"""
    return registry.bind_devices(serial, body.devices).to_dict()


@router.post("/{serial}/unbind")
def unbind_devices(
    serial: str,
    body: DeviceUids,
    registry: RegistryProvider = Depends(get_registry),
) -> Dict[str, Any]:
    registry.unbind_devices(serial, body.devices)
    return {"ok": True}
