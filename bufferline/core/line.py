"""Final line assembly: overflow markers, fill spacer, group row and close control."""

import logging
from typing import List, Optional, Sequence, Tuple

from bufferline.core.clickable import with_handler
from bufferline.core.highlights import Highlights
from bufferline.core.models import Fragment, Group, Tabline
from bufferline.core.options import BufferlineOptions
from bufferline.core.sections import Marker
from bufferline.util.display import display_width, fragments_width

logger = logging.getLogger("bufferline.line")

PADDING = " "
# Hosts such as terminal tablines cap the number of atomic items per line.
MAX_LINE_UNITS = 80


def marker_element_sizes(left_icon: str, right_icon: str) -> Tuple[int, int]:
    """Marker overhead around the count: padding + icon + padding for each side."""
    left = display_width(PADDING * 2 + left_icon + PADDING * 2)
    right = display_width(PADDING * 2 + right_icon + PADDING)
    return left, right


def render_trunc_marker(count: int, icon: str, style: str, trailing: str = "") -> List[Fragment]:
    return [(style, f"{PADDING}{count}{PADDING}{icon}{PADDING}{trailing}")]


def render_close(icon: str, highlights: Highlights, handler=None) -> List[Fragment]:
    text = PADDING + icon + PADDING
    if handler is None:
        return [(highlights.close, text)]
    return [(highlights.close, text, handler)]


def visible_groups(groups: Sequence[Group]) -> List[Group]:
    """The group row is only worth showing when there is more than one group."""
    return list(groups) if len(groups) > 1 else []


def coalesce_units(units: List[List[Fragment]], limit: int = MAX_LINE_UNITS) -> List[List[Fragment]]:
    if len(units) <= limit:
        return units
    logger.warning("Line has %d atomic units, merging the overflow into one (limit %d)", len(units), limit)
    head = units[: limit - 2]
    merged = [fragment for unit in units[limit - 2 : -1] for fragment in unit]
    return head + [with_handler(merged, None)] + [units[-1]]


def assemble_line(
    fitted: List[List[Fragment]],
    marker: Marker,
    groups: Sequence[Group],
    columns: int,
    options: BufferlineOptions,
    highlights: Highlights,
    close_handler=None,
    current_id: Optional[int] = None,
) -> Tabline:
    units: List[List[Fragment]] = []
    if marker.left_dropped > 0:
        units.append(render_trunc_marker(marker.left_dropped, options.left_trunc_marker, highlights.background, PADDING))
    units.extend(fitted)
    if marker.right_dropped > 0:
        units.append(render_trunc_marker(marker.right_dropped, options.right_trunc_marker, highlights.background))

    tail: List[List[Fragment]] = [list(group.fragments) for group in visible_groups(groups)]
    tail.append(render_close(options.close_icon, highlights, close_handler))

    used = sum(fragments_width(unit) for unit in units) + sum(fragments_width(unit) for unit in tail)
    units.append([(highlights.fill, PADDING * max(0, columns - used))])
    units.extend(tail)

    return Tabline(
        units=coalesce_units(units),
        left_dropped=marker.left_dropped,
        right_dropped=marker.right_dropped,
        current_id=current_id,
    )


__all__ = [
    "MAX_LINE_UNITS",
    "assemble_line",
    "coalesce_units",
    "marker_element_sizes",
    "render_close",
    "render_trunc_marker",
    "visible_groups",
]
