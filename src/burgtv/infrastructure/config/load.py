"""Layered configuration loading for the BurgTV API.

Layers, lowest to highest precedence::

    DEFAULT_CONFIG  <  --config YAML  <  BURGTV_* env (incl. --dotenv)  <  CLI flags

Every layer is normalized to the sectioned shape of ``config.yaml``
(``http``, ``logging``, ``validation``, ``cors``) before merging, so a
flat env/CLI key such as ``validation_prefix_bytes`` and a YAML entry
``validation: {prefix_bytes: ...}`` land in the same place.
"""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides, PlaylistValidationConfig

_TOP_LEVEL_KEYS: tuple[str, ...] = ("app_name", "environment")

# Flat key -> (section, key in section).
_FLAT_KEYS: dict[str, tuple[str, str]] = {
    "http_timeout_seconds": ("http", "timeout_seconds"),
    "http_follow_redirects": ("http", "follow_redirects"),
    "http_user_agent": ("http", "user_agent"),
    "log_level": ("logging", "level"),
    "log_format": ("logging", "format"),
    "cors_allowed_origins": ("cors", "allowed_origins"),
    **{
        f"validation_{name}": ("validation", name)
        for name in PlaylistValidationConfig.model_fields
    },
}

_SECTIONS: frozenset[str] = frozenset(section for section, _ in _FLAT_KEYS.values())


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into ``base`` in place; nested mappings merge key-wise."""
    for key, value in override.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _deep_merge(current, value)
        else:
            base[key] = value
    return base


def _sectioned(layer: Mapping[str, Any]) -> dict[str, Any]:
    """Bring one layer (flat, sectioned or mixed) into sectioned shape.

    Unknown keys are dropped. A flat key wins over the same entry given
    inside its section in the same layer.
    """
    out: dict[str, Any] = {
        key: layer[key] for key in _TOP_LEVEL_KEYS if key in layer
    }

    for section in _SECTIONS:
        block = layer.get(section)
        if isinstance(block, Mapping):
            out[section] = dict(block)

    for flat_key, (section, key) in _FLAT_KEYS.items():
        if flat_key in layer:
            out.setdefault(section, {})[key] = layer[flat_key]

    return out


def _yaml_layer(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise FileNotFoundError(config_path)

    parsed = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(
            f"Config YAML must be a mapping, got: {type(parsed)!r} ({config_path})"
        )
    return parsed


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Build the validated AppConfig from all layers.

    Args:
        config_path: Optional YAML file; must exist if given.
        dotenv_path: Optional .env file; must exist if given. Its values
            join the env layer without replacing variables already set.
        cli_overrides: Flat or sectioned values from the command line.

    Raises:
        FileNotFoundError: A given config or dotenv path does not exist.
        ValueError: The YAML top level is not a mapping, or the merged
            values fail validation (pydantic ``ValidationError``).

    Reads files and the environment only; never writes anything.
    """
    if dotenv_path is not None:
        if not dotenv_path.exists():
            raise FileNotFoundError(dotenv_path)
        load_dotenv(dotenv_path, override=False)

    layers: list[Mapping[str, Any]] = [deepcopy(DEFAULT_CONFIG)]
    if config_path is not None:
        layers.append(_yaml_layer(config_path))
    layers.append(EnvOverrides().to_update_dict())
    layers.append(cli_overrides or {})

    merged: dict[str, Any] = {}
    for layer in layers:
        _deep_merge(merged, _sectioned(layer))

    return AppConfig.model_validate(merged)
