from .highlights import DEFAULT_HIGHLIGHTS, Highlights
from .models import Fragment, Group, Item, Tabline
from .options import DEFAULT_OPTIONS, BufferlineOptions, options_from_mapping
from .sections import Marker, Section, split_sections
from .segment import SegmentRecord, render_segment
from .truncation import fit_sections
from .line import MAX_LINE_UNITS, assemble_line
from .groups import render_group, render_groups

__all__ = [
    "DEFAULT_HIGHLIGHTS",
    "Highlights",
    "Fragment",
    "Group",
    "Item",
    "Tabline",
    "DEFAULT_OPTIONS",
    "BufferlineOptions",
    "options_from_mapping",
    "Marker",
    "Section",
    "split_sections",
    "SegmentRecord",
    "render_segment",
    "fit_sections",
    "MAX_LINE_UNITS",
    "assemble_line",
    "render_group",
    "render_groups",
]
