"""Render options: a read-only configuration struct passed into every render."""

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Final, Mapping

logger = logging.getLogger("bufferline.config")

NUMBERS_NONE = "none"
NUMBERS_ID = "id"
NUMBERS_ORDINAL = "ordinal"

STYLE_PLAIN = "plain"
STYLE_SUPERSCRIPT = "superscript"

SEPARATOR_THIN = "thin"
SEPARATOR_THICK = "thick"

VIEW_DEFAULT = "default"
VIEW_MULTIWINDOW = "multiwindow"

OPTION_CHOICES: Final[Dict[str, frozenset]] = {
    "numbers": frozenset({NUMBERS_NONE, NUMBERS_ID, NUMBERS_ORDINAL}),
    "number_style": frozenset({STYLE_PLAIN, STYLE_SUPERSCRIPT}),
    "separator_style": frozenset({SEPARATOR_THIN, SEPARATOR_THICK}),
    "view": frozenset({VIEW_DEFAULT, VIEW_MULTIWINDOW}),
}

TRUE_TOKENS = frozenset({"true", "yes", "on", "1"})
FALSE_TOKENS = frozenset({"false", "no", "off", "0"})


@dataclass(frozen=True)
class BufferlineOptions:
    view: str = VIEW_DEFAULT
    numbers: str = NUMBERS_NONE
    number_style: str = STYLE_SUPERSCRIPT
    mappings: bool = False
    max_name_length: int = 15
    show_close_icons: bool = True
    separator_style: str = SEPARATOR_THIN
    close_icon: str = ""
    buffer_close_icon: str = ""
    modified_icon: str = "●"
    left_trunc_marker: str = ""
    right_trunc_marker: str = ""
    theme: str = "dark-olive"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_OPTIONS = BufferlineOptions()


def _coerce(name: str, value: Any, default: Any) -> Any:
    if name in OPTION_CHOICES:
        token = str(value or "").strip().lower()
        if token in OPTION_CHOICES[name]:
            return token
        logger.warning("Unknown %s value %r, using %r", name, value, default)
        return default
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        token = str(value).strip().lower()
        if token in TRUE_TOKENS:
            return True
        if token in FALSE_TOKENS:
            return False
        logger.warning("Invalid %s value %r, using %r", name, value, default)
        return default
    if isinstance(default, int):
        try:
            number = int(value)
        except (TypeError, ValueError):
            number = 0
        if number <= 0:
            logger.warning("Invalid %s value %r, using %r", name, value, default)
            return default
        return number
    if value is None:
        return default
    return str(value)


def options_from_mapping(data: Mapping[str, Any]) -> BufferlineOptions:
    """Build options from user preferences, keeping defaults for bad or missing keys."""
    known = {f.name for f in fields(BufferlineOptions)}
    values: Dict[str, Any] = {}
    for key, value in (data or {}).items():
        if key not in known:
            logger.warning("Ignoring unknown option %r", key)
            continue
        values[key] = _coerce(key, value, getattr(DEFAULT_OPTIONS, key))
    return BufferlineOptions(**values)


__all__ = [
    "BufferlineOptions",
    "DEFAULT_OPTIONS",
    "options_from_mapping",
    "OPTION_CHOICES",
    "NUMBERS_NONE",
    "NUMBERS_ID",
    "NUMBERS_ORDINAL",
    "STYLE_PLAIN",
    "STYLE_SUPERSCRIPT",
    "SEPARATOR_THIN",
    "SEPARATOR_THICK",
    "VIEW_DEFAULT",
    "VIEW_MULTIWINDOW",
]
