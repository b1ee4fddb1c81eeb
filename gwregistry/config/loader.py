# gwregistry/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any

import yaml

from .modules import BindingConfig, ServerConfig
from .validator import validate_config, ConfigIssue


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GWREGISTRY_CONFIG"


class RegistryHubConfig:
    """
    Unified gwregistry configuration.

    All fields have code defaults - YAML is optional.
    """

    def __init__(
        self,
        binding: Optional[BindingConfig] = None,
        server: Optional[ServerConfig] = None,
    ):
        self.binding = binding or BindingConfig.default()
        self.server = server or ServerConfig.default()

    @classmethod
    def default(cls) -> "RegistryHubConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RegistryHubConfig":
        """Merge a parsed YAML document into code defaults"""
        config = cls.default()
        if not data:
            return config
        if not isinstance(data, dict):
            logger.warning("Ignoring config document of type %s", type(data).__name__)
            return config

        if isinstance(data.get("binding"), dict):
            config.binding = BindingConfig.from_dict(
                {**config.binding.to_dict(), **data["binding"]}
            )

        if isinstance(data.get("server"), dict):
            config.server = ServerConfig.from_dict(
                {**config.server.to_dict(), **data["server"]}
            )

        return config

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "RegistryHubConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries:
                1. $GWREGISTRY_CONFIG
                2. ~/.gwregistry/config.yml

        Returns:
            RegistryHubConfig instance (always has code defaults as fallback)
        """
        return cls.from_dict(_load_yaml(config_path))

    def validate(self) -> list[ConfigIssue]:
        return validate_config(self.binding, self.server)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "binding": self.binding.to_dict(),
            "server": self.server.to_dict(),
        }

    def __repr__(self) -> str:
        return f"RegistryHubConfig(binding={self.binding!r}, server={self.server!r})"


def _candidate_paths(config_path: Optional[Path]) -> list[Path]:
    if config_path:
        return [Path(config_path)]
    paths = []
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        paths.append(Path(env_path))
    paths.append(Path.home() / ".gwregistry" / "config.yml")
    return paths


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    for path in _candidate_paths(config_path):
        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    return yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Failed to load config %s, using defaults: %s", path, e)
                return None

    return None


def load_config(config_path: Optional[Path] = None) -> RegistryHubConfig:
    """
    Load gwregistry configuration.

    Note:
        If YAML is not found or invalid, returns code defaults
    """
    return RegistryHubConfig.from_yaml(config_path)


__all__ = [
    "RegistryHubConfig",
    "load_config",
    "CONFIG_ENV_VAR",
]
