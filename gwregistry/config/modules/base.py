# gwregistry/config/modules/base.py
"""
Base Module Configuration

Base class for all module configurations.
"""

from dataclasses import dataclass, fields
from typing import Dict, Any


@dataclass(frozen=True)
class ModuleConfig:
    """
    Base configuration for all modules.

    Code holds every default; YAML only overrides.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Declared fields as plain YAML-safe values"""
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, ModuleConfig):
                value = value.to_dict()
            elif not isinstance(value, (str, int, float, bool, list, dict, type(None))):
                value = str(value)
            out[f.name] = value
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Build from a mapping, ignoring keys the config does not declare"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
