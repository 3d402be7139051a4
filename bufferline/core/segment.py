"""Per-item segment rendering.

Rendering is two-phase: ``render_segment`` builds the fragments and measures
the final display width up front, while the trailing separator is only
emitted by ``SegmentRecord.materialize`` once the segment's final position in
the fitted line is known.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from bufferline.application.ports import ClickDispatch
from bufferline.core.clickable import handle_close_item, left_click_handler, make_clickable
from bufferline.core.highlights import Highlights, item_highlights
from bufferline.core.models import Fragment, Item
from bufferline.core.options import (
    NUMBERS_NONE,
    NUMBERS_ORDINAL,
    SEPARATOR_THIN,
    STYLE_SUPERSCRIPT,
    BufferlineOptions,
)
from bufferline.util.display import display_width

PADDING = " "
TRUNCATION_SYMBOL = "…"
# Left aligned so the highlight never shows in the middle of the cell.
INDICATOR_SYMBOL = "▎"

SUPERSCRIPT_NUMBERS: Dict[int, str] = {
    0: "⁰",
    1: "¹",
    2: "²",
    3: "³",
    4: "⁴",
    5: "⁵",
    6: "⁶",
    7: "⁷",
    8: "⁸",
    9: "⁹",
    10: "¹⁰",
    11: "¹¹",
    12: "¹²",
    13: "¹³",
    14: "¹⁴",
    15: "¹⁵",
    16: "¹⁶",
    17: "¹⁷",
    18: "¹⁸",
    19: "¹⁹",
    20: "²⁰",
}

# (current or visible, other)
SEPARATORS: Dict[str, Tuple[str, str]] = {
    "thick": ("▌", "▐"),
    "thin": ("▏", "▕"),
}


@dataclass(frozen=True)
class SegmentRecord:
    """Width-measured item segment awaiting its final position."""

    item_id: int
    body: Tuple[Fragment, ...]
    separator: Fragment
    width: int
    is_current: bool = False

    def materialize(self, index: int, total: int) -> List[Fragment]:
        fragments = list(self.body)
        if index < total - 1:
            fragments.append(self.separator)
        return fragments


def truncate_name(name: str, limit: int) -> str:
    # Counts code points rather than cells; wide glyphs may overshoot the slot.
    if len(name) > limit:
        return name[:limit] + TRUNCATION_SYMBOL
    return name


def number_prefix(item: Item, mode: str, style: str) -> str:
    n = item.ordinal if mode == NUMBERS_ORDINAL else item.id
    if style == STYLE_SUPERSCRIPT and n in SUPERSCRIPT_NUMBERS:
        return SUPERSCRIPT_NUMBERS[n]
    return f"{n}."


def separator_symbol(style: str, is_current: bool, is_visible: bool) -> str:
    active, inactive = SEPARATORS.get(style, SEPARATORS[SEPARATOR_THIN])
    return active if (is_current or is_visible) else inactive


def render_segment(
    item: Item,
    options: BufferlineOptions,
    highlights: Highlights,
    slot_width: int,
    dispatch: Optional[ClickDispatch] = None,
    click_mode: Optional[str] = None,
) -> SegmentRecord:
    base_hl, modified_hl = item_highlights(highlights, item.is_current, item.is_visible)

    name = truncate_name(item.name, options.max_name_length)
    component = item.icon + PADDING + name + PADDING
    length = display_width(component)

    # Reserve room for the modified marker on both sides so the segment does
    # not shift when the item becomes modified.
    modified_section = options.modified_icon + PADDING
    m_size = display_width(modified_section)
    m_padding = PADDING * m_size
    body: List[Fragment] = [(base_hl, m_padding), (base_hl, component)]
    if item.is_modifiable and item.is_modified:
        body.append((modified_hl, modified_section))
    else:
        body.append((base_hl, m_padding))
    length += m_size * 2

    if length < slot_width:
        pad = PADDING * math.ceil((slot_width - length) / 2)
        body = [(base_hl, pad)] + body + [(base_hl, pad)]
        length += display_width(pad) * 2

    if options.numbers != NUMBERS_NONE:
        number_component = number_prefix(item, options.numbers, options.number_style) + PADDING
        body.insert(0, (base_hl, number_component))
        length += display_width(number_component)

    body = make_clickable(click_mode or options.view, body, item.id, dispatch)

    if item.is_current:
        fragments = [(highlights.indicator, INDICATOR_SYMBOL)] + body
        length += display_width(INDICATOR_SYMBOL)
    else:
        fragments = [(base_hl, PADDING)] + body
        length += display_width(PADDING)

    if item.diagnostics > 0:
        diagnostic_section = f"{item.diagnostics}{PADDING}"
        fragments.append((highlights.diagnostic, diagnostic_section))
        length += display_width(diagnostic_section)

    if options.show_close_icons:
        close_text = options.buffer_close_icon + PADDING
        if dispatch is not None:
            item_id = item.id
            handler = left_click_handler(lambda: handle_close_item(dispatch, item_id))
            fragments.append((base_hl, close_text, handler))
        else:
            fragments.append((base_hl, close_text))
        length += display_width(close_text)

    # Counted for every segment, including the last one which never draws it.
    symbol = separator_symbol(options.separator_style, item.is_current, item.is_visible)
    length += display_width(symbol)

    return SegmentRecord(
        item_id=item.id,
        body=tuple(fragments),
        separator=(highlights.separator, symbol),
        width=length,
        is_current=item.is_current,
    )


__all__ = [
    "SegmentRecord",
    "render_segment",
    "truncate_name",
    "number_prefix",
    "separator_symbol",
    "SUPERSCRIPT_NUMBERS",
    "SEPARATORS",
    "INDICATOR_SYMBOL",
    "TRUNCATION_SYMBOL",
    "PADDING",
]
