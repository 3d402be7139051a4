"""Fit the three sections into the available width.

Prerequisite: the current item always stays in view.

1. Measure the line: all sections plus the width reserved for the overflow
   markers that are already showing.
2. If it fits, materialize every surviving segment with its final position.
3. Otherwise drop from the wider side: the first (furthest) item of
   ``before``, or the whole of ``after`` at once. Ties drop from ``before``.
4. Re-measure and repeat until it fits or only the current item is left.
"""

import logging
from typing import List

from bufferline.core.models import Fragment
from bufferline.core.sections import Marker, Section

logger = logging.getLogger("bufferline.truncation")


def total_width(before: Section, current: Section, after: Section, marker: Marker) -> int:
    return before.width + current.width + after.width + marker.reserved_width()


def fit_sections(
    before: Section,
    current: Section,
    after: Section,
    available_width: int,
    marker: Marker,
) -> List[List[Fragment]]:
    """Shrink the sections in place and return one fragment unit per kept segment.

    ``marker`` is updated with the number of items dropped on each side.
    """
    while available_width < total_width(before, current, after, marker):
        if not before.records and not after.records:
            logger.debug(
                "Current item needs %d cells but only %d are available",
                total_width(before, current, after, marker),
                available_width,
            )
            break
        if before.records and (before.width >= after.width or not after.records):
            marker.left_dropped += before.drop_first(1)
        else:
            marker.right_dropped += after.drop_last(len(after))

    records = before.records + current.records + after.records
    count = len(records)
    return [record.materialize(index, count) for index, record in enumerate(records)]


__all__ = ["fit_sections", "total_width"]
