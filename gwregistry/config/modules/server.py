# gwregistry/config/modules/server.py
"""
Server Module Configuration

Listen address and log level for the HTTP front end.
"""

from dataclasses import dataclass
from .base import ModuleConfig


@dataclass(frozen=True)
class ServerConfig(ModuleConfig):
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"

    @classmethod
    def default(cls) -> "ServerConfig":
        return cls()
