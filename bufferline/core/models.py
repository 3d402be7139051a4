"""Render-pass data model: items, groups and the finished tabline."""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText

from bufferline.util.display import fragments_text, fragments_width

# (style, text) or (style, text, mouse_handler)
Fragment = Tuple[Any, ...]


@dataclass
class Item:
    """One document as seen by a single render pass.

    Attributes:
        id: Stable identity owned by the host
        name: Display name (already reduced to a basename by the host)
        ordinal: 1-based position in the visible list, independent of id
        is_current: Document shown in the focused window
        is_visible: Document shown in some other window
        icon: Optional leading glyph
        diagnostics: Problem count rendered as a trailing badge when positive
    """

    id: int
    name: str
    ordinal: int
    is_current: bool = False
    is_visible: bool = False
    is_modifiable: bool = True
    is_modified: bool = False
    icon: str = ""
    diagnostics: int = 0


@dataclass
class Group:
    id: int
    fragments: List[Fragment]
    width: int
    is_active: bool = False
    item_ids: List[int] = field(default_factory=list)


@dataclass
class Tabline:
    """A rendered line: ordered atomic units plus the final drop counts."""

    units: List[List[Fragment]]
    left_dropped: int = 0
    right_dropped: int = 0
    current_id: Optional[int] = None

    @property
    def fragments(self) -> FormattedText:
        return FormattedText([fragment for unit in self.units for fragment in unit])

    @property
    def text(self) -> str:
        return fragments_text(self.fragments)

    @property
    def width(self) -> int:
        return fragments_width(self.fragments)


__all__ = ["Fragment", "Item", "Group", "Tabline"]
