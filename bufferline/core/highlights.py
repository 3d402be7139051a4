"""Style tokens interpolated verbatim into rendered fragments."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Highlights:
    """Named style tokens; resolved to colors by the host's prompt_toolkit Style."""

    fill: str = "class:bufferline.fill"
    background: str = "class:bufferline.background"
    inactive: str = "class:bufferline.inactive"
    selected: str = "class:bufferline.selected"
    modified: str = "class:bufferline.modified"
    modified_inactive: str = "class:bufferline.modified.inactive"
    modified_selected: str = "class:bufferline.modified.selected"
    separator: str = "class:bufferline.separator"
    indicator: str = "class:bufferline.indicator"
    diagnostic: str = "class:bufferline.diagnostic"
    tab: str = "class:bufferline.tab"
    tab_selected: str = "class:bufferline.tab.selected"
    close: str = "class:bufferline.close"


DEFAULT_HIGHLIGHTS = Highlights()


def item_highlights(highlights: Highlights, is_current: bool, is_visible: bool):
    """Return (base style, modified style) for an item's state."""
    if is_current:
        return highlights.selected, highlights.modified_selected
    if is_visible:
        return highlights.inactive, highlights.modified_inactive
    return highlights.background, highlights.modified


__all__ = ["Highlights", "DEFAULT_HIGHLIGHTS", "item_highlights"]
