from __future__ import annotations

from .load import load_config
from .schema import AppConfig, EnvOverrides, PlaylistValidationConfig

__all__ = ["AppConfig", "EnvOverrides", "PlaylistValidationConfig", "load_config"]
