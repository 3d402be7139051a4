"""Sections (before / current / after) and the overflow marker counters."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from bufferline.core.segment import SegmentRecord
from bufferline.util.display import display_width

logger = logging.getLogger("bufferline.sections")


@dataclass
class Section:
    """Ordered run of segment records with a running display width."""

    records: List[SegmentRecord] = field(default_factory=list)
    width: int = 0

    def __len__(self) -> int:
        return len(self.records)

    def append(self, record: SegmentRecord) -> None:
        self.records.append(record)
        self.width += record.width

    def drop_first(self, count: int = 1) -> int:
        dropped = self.records[:count]
        del self.records[:count]
        self.width -= sum(r.width for r in dropped)
        return len(dropped)

    def drop_last(self, count: int = 1) -> int:
        if count <= 0:
            return 0
        dropped = self.records[-count:]
        del self.records[-count:]
        self.width -= sum(r.width for r in dropped)
        return len(dropped)


@dataclass
class Marker:
    left_dropped: int = 0
    right_dropped: int = 0
    left_element_size: int = 0
    right_element_size: int = 0

    @staticmethod
    def _size(count: int, element_size: int) -> int:
        return display_width(str(count)) + element_size if count > 0 else 0

    def left_size(self) -> int:
        return self._size(self.left_dropped, self.left_element_size)

    def right_size(self) -> int:
        return self._size(self.right_dropped, self.right_element_size)

    def reserved_width(self) -> int:
        return self.left_size() + self.right_size()


def split_sections(records: Iterable[SegmentRecord]) -> Tuple[Section, Section, Section]:
    before, current, after = Section(), Section(), Section()
    for record in records:
        if record.is_current and not current.records:
            current.append(record)
        elif not current.records:
            before.append(record)
        else:
            if record.is_current:
                logger.warning("Item %s is flagged current after item %s; treating it as inactive",
                               record.item_id, current.records[0].item_id)
            after.append(record)
    return before, current, after


__all__ = ["Section", "Marker", "split_sections"]
