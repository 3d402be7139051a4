"""Display width helpers with proper Unicode width handling."""

from typing import Iterable, Sequence

from wcwidth import wcwidth


def display_width(text: str) -> int:
    """Return visual width of text accounting for wide/narrow characters."""
    width = 0
    for ch in text:
        w = wcwidth(ch)
        if w is None:
            w = 0
        width += max(0, w)
    return width


def fragments_text(fragments: Iterable[Sequence]) -> str:
    """Concatenate the text part of (style, text[, handler]) fragments."""
    return "".join(fragment[1] for fragment in fragments)


def fragments_width(fragments: Iterable[Sequence]) -> int:
    return sum(display_width(fragment[1]) for fragment in fragments)


__all__ = ["display_width", "fragments_text", "fragments_width"]
