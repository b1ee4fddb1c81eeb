# gwregistry/web/app.py
"""
HTTP application factory

Composes a registry with the API routers to create a deployable ASGI
application. The app depends on RegistryProvider only.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gwregistry import __version__
from gwregistry.config import RegistryHubConfig
from gwregistry.core.errors import CapacityError, NotFoundError, RegistryError, ValidationError
from gwregistry.core.registry import Registry, RegistryProvider

from .routes.api import devices, gateways


logger = logging.getLogger(__name__)


def status_for(error: RegistryError) -> int:
    """HTTP status for a domain error"""
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, CapacityError):
        return 409
    return 500


async def _registry_error_handler(request: Request, exc: RegistryError) -> JSONResponse:
    status = status_for(exc)
    logger.info("%s %s -> %d %s", request.method, request.url.path, status, exc)
    return JSONResponse(status_code=status, content={"error": exc.to_dict()})


def create_app(
    registry: Optional[RegistryProvider] = None,
    config: Optional[RegistryHubConfig] = None,
) -> FastAPI:
    """
    Build the ASGI app.

    This is the single composition root used by:
    - CLI: gwregistry serve
    - Tests: httpx.ASGITransport(app=...)
    """
    config = config or RegistryHubConfig.default()
    if registry is None:
        registry = Registry(config.binding)

    app = FastAPI(title="gwregistry", version=__version__)
    app.state.registry = registry
    app.state.config = config

    app.add_exception_handler(RegistryError, _registry_error_handler)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(gateways.router)
    app.include_router(devices.router)

    return app


__all__ = [
    "create_app",
    "status_for",
]
