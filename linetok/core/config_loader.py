"""
linetok.core.config_loader
==========================
Reads YAML configuration files, named presets, or plain dicts.
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Union

import yaml

from linetok.core.exceptions import ConfigError


_PRESET_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "finder", "config", "presets",
)


def load_config(source: Union[str, Dict[str, Any], None]) -> Dict[str, Any]:
    """
    Load and return a config dict from various sources.

    Parameters
    ----------
    source : str, dict, or None
        - None       → returns empty dict (finder uses its own defaults)
        - dict       → returned as-is
        - str path   → loaded from the YAML file at that path
        - preset name (no slashes, no .yaml/.yml) → looked up in presets/

    Returns
    -------
    dict
        The raw configuration dictionary (not yet validated).

    Raises
    ------
    ConfigError
        If the source is invalid or the YAML cannot be parsed.
    """
    if source is None:
        return {}

    if isinstance(source, dict):
        return source

    if isinstance(source, str):
        if _looks_like_preset(source):
            resolved = _resolve_preset(source)
            if resolved is not None:
                return resolved
            # Fall through to try as a file path

        path = os.path.expanduser(source)
        if not os.path.isfile(path):
            raise ConfigError(
                f"Config file or preset not found: {source!r}",
                details={"path": source, "presets": list_presets()},
            )
        return _read_yaml(path)

    raise ConfigError(
        f"Unsupported config source type: {type(source).__name__}",
        details={"source": repr(source)},
    )


def list_presets() -> List[str]:
    """Return the names of all bundled presets, sorted."""
    if not os.path.isdir(_PRESET_DIR):
        return []
    return sorted(
        name[: -len(".yaml")]
        for name in os.listdir(_PRESET_DIR)
        if name.endswith(".yaml")
    )


def _looks_like_preset(source: str) -> bool:
    return (
        os.sep not in source
        and "/" not in source
        and not source.endswith((".yaml", ".yml"))
    )


def _resolve_preset(name: str) -> Dict[str, Any] | None:
    """
    Look up a named preset in the bundled presets/ directory.
    Returns None if the preset is not found (caller can try other sources).
    """
    preset_path = os.path.join(_PRESET_DIR, f"{name}.yaml")
    if not os.path.isfile(preset_path):
        return None
    return _read_yaml(preset_path)


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(
            f"Failed to parse YAML config: {path!r}",
            details={"error": str(exc)},
        ) from exc
    return data if data is not None else {}
