# gwregistry/web/schemas.py
"""
Request bodies for the HTTP API.

Bodies only check JSON primitive types; range and existence checks stay
in the registry. Key presence survives through model_dump(exclude_unset=True),
so an omitted field and an explicit null stay distinguishable.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr


class GatewayIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    serial: Optional[StrictStr] = None
    name: Optional[StrictStr] = None
    ip: Optional[StrictInt] = None
    devices: Optional[List[StrictInt]] = None


class DeviceIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    uid: Optional[StrictInt] = None
    vendor: Optional[StrictStr] = None
    status: Optional[StrictStr] = None


class DeviceUids(BaseModel):
    model_config = ConfigDict(extra="forbid")

    devices: List[StrictInt]
