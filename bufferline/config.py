from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from bufferline.core.options import BufferlineOptions, options_from_mapping

USER_CONFIG_PATH = Path.home() / ".bufferline_config.yaml"

logger = logging.getLogger("bufferline.config")


def _load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    target = path or USER_CONFIG_PATH
    if not target.exists():
        return {}
    try:
        data = yaml.safe_load(target.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", target, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a mapping", target)
        return {}
    return data


def _save_config(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    target = path or USER_CONFIG_PATH
    if not data:
        if target.exists():
            target.unlink()
        return
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def deep_merge(base: Dict[str, Any], extra: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge extra into a copy of base, preferring extra's values."""
    merged = dict(base)
    for key, value in extra.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(dict(merged[key]), value)
        else:
            merged[key] = value
    return merged


def load_options(overrides: Optional[Mapping[str, Any]] = None, path: Optional[Path] = None) -> BufferlineOptions:
    """Defaults <- user config file <- explicit overrides."""
    stored = _load_config(path)
    prefs = stored.get("options", stored)
    if not isinstance(prefs, Mapping):
        prefs = {}
    merged = deep_merge(dict(prefs), overrides or {})
    return options_from_mapping(merged)


def set_user_option(key: str, value: Any, path: Optional[Path] = None) -> None:
    data = _load_config(path)
    options = dict(data.get("options") or {})
    if value is None:
        options.pop(key, None)
    else:
        options[key] = value
    if options:
        data["options"] = options
    else:
        data.pop("options", None)
    _save_config(data, path)
