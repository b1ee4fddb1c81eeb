# gwregistry/web/deps.py
from fastapi import Request

from gwregistry.core.registry import RegistryProvider


def get_registry(request: Request) -> RegistryProvider:
    """The registry instance the app was built around"""
    return request.app.state.registry
