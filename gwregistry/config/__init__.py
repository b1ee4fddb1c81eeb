# gwregistry/config/__init__.py
"""
gwregistry Configuration

YAML is input parameters, code has defaults (YAML can be deleted).
"""

from .modules import ModuleConfig, BindingConfig, ServerConfig
from .loader import RegistryHubConfig, load_config, CONFIG_ENV_VAR
from .validator import validate_config, ConfigIssue

__all__ = [
    "ModuleConfig",
    "BindingConfig",
    "ServerConfig",
    "RegistryHubConfig",
    "load_config",
    "CONFIG_ENV_VAR",
    "validate_config",
    "ConfigIssue",
]
