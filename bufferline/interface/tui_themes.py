#!/usr/bin/env python3
"""Tabline themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "bufferline.fill": "bg:#1f2226 #6d717a",
        "bufferline.background": "bg:#2a2e33 #6d717a",
        "bufferline.inactive": "bg:#33383e #97a0a9",
        "bufferline.selected": "bg:#3b3b3b #d7dfe6 bold italic",
        "bufferline.modified": "bg:#2a2e33 #9ad974",
        "bufferline.modified.inactive": "bg:#33383e #9ad974",
        "bufferline.modified.selected": "bg:#3b3b3b #9ad974",
        "bufferline.separator": "bg:#2a2e33 #16181b",
        "bufferline.indicator": "bg:#3b3b3b #ffb347",
        "bufferline.diagnostic": "bg:#2a2e33 #e06c75 bold",
        "bufferline.tab": "bg:#33383e #6d717a",
        "bufferline.tab.selected": "bg:#4b525a #d7dfe6 bold",
        "bufferline.close": "bg:#2a2e33 #6d717a",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "bufferline.fill": "bg:#15171a #6f757d",
        "bufferline.background": "bg:#202328 #8a9097",
        "bufferline.inactive": "bg:#2b2f35 #a7b0ba",
        "bufferline.selected": "bg:#3d4047 #e8eaec bold italic",
        "bufferline.modified": "bg:#202328 #b8f171",
        "bufferline.modified.inactive": "bg:#2b2f35 #b8f171",
        "bufferline.modified.selected": "bg:#3d4047 #b8f171",
        "bufferline.separator": "bg:#202328 #0c0d0f",
        "bufferline.indicator": "bg:#3d4047 #f0c674",
        "bufferline.diagnostic": "bg:#202328 #ff6b6b bold",
        "bufferline.tab": "bg:#2b2f35 #6f757d",
        "bufferline.tab.selected": "bg:#5a6169 #e8eaec bold",
        "bufferline.close": "bg:#202328 #8a9097",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
