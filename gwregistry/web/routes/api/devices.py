# gwregistry/web/routes/api/devices.py
"""
Device API endpoints
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from gwregistry.core.errors import RegistryError, codes
from gwregistry.core.registry import RegistryProvider
from gwregistry.web.deps import get_registry
from gwregistry.web.schemas import DeviceIn


router = APIRouter(prefix="/devices", tags=["devices"])


@router.get("")
def list_devices(
    serial: Optional[str] = Query(None, description="Only devices bound to this gateway"),
    registry: RegistryProvider = Depends(get_registry),
) -> List[Dict[str, Any]]:
    devices = registry.list_devices(serial or None)
    if devices is None:
        raise RegistryError.not_found(f"Gateway {serial} does not exist.", details={"serial": serial})
    return [d.to_dict() for d in devices]


@router.get("/{uid}")
def get_device(uid: int, registry: RegistryProvider = Depends(get_registry)) -> Dict[str, Any]:
    device = registry.get_device(uid)
    if device is None:
        raise RegistryError.not_found(
            f"Device {uid} does not exist.",
            error_code=codes.DEVICE_NOT_FOUND,
            details={"uid": uid},
        )
    return device.to_dict()


@router.put("")
def put_device(body: DeviceIn, registry: RegistryProvider = Depends(get_registry)) -> Dict[str, Any]:
    uid = registry.upsert_device(body.model_dump(exclude_unset=True))
    return {"uid": uid}


@router.delete("/{uid}")
def delete_device(uid: int, registry: RegistryProvider = Depends(get_registry)) -> Dict[str, Any]:
    registry.delete_device(uid)
    return {"ok": True}
