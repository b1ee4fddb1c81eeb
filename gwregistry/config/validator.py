# gwregistry/config/validator.py
"""
Configuration Validator

Validates configuration values that would break the registry or server.
Returns structured issues with level (warn/error), path, message, hint.
"""

from typing import List, Literal
from dataclasses import dataclass
from .modules import BindingConfig, ServerConfig


MAX_PORT_VALUE = 65535

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for CLI/logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "binding.max_devices_per_gateway"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"{self.level.upper()} [{self.path}] {self.message}{hint_str}"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(binding: BindingConfig, server: ServerConfig) -> List[ConfigIssue]:
    """
    Validate configuration.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    if not _is_int(binding.max_devices_per_gateway) or binding.max_devices_per_gateway < 1:
        issues.append(ConfigIssue(
            level="error",
            path="binding.max_devices_per_gateway",
            message=f"must be a positive integer, got {binding.max_devices_per_gateway!r}",
            hint="Default is 10",
        ))

    if not _is_int(binding.uid_start) or binding.uid_start < 1:
        issues.append(ConfigIssue(
            level="error",
            path="binding.uid_start",
            message=f"must be a positive integer, got {binding.uid_start!r}",
        ))

    if not _is_int(server.port) or not 0 < server.port <= MAX_PORT_VALUE:
        issues.append(ConfigIssue(
            level="error",
            path="server.port",
            message=f"must be an integer in 1..{MAX_PORT_VALUE}, got {server.port!r}",
        ))

    if str(server.log_level).lower() not in LOG_LEVELS:
        issues.append(ConfigIssue(
            level="warn",
            path="server.log_level",
            message=f"unknown log level {server.log_level!r}, 'info' will be used",
            hint=f"One of: {', '.join(LOG_LEVELS)}",
        ))

    return issues


__all__ = [
    "ConfigIssue",
    "validate_config",
    "MAX_PORT_VALUE",
    "LOG_LEVELS",
]
