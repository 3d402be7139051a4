from dataclasses import dataclass, field
from typing import List, Protocol


@dataclass
class DocumentInfo:
    """Host-side snapshot of one valid document."""

    id: int
    name: str
    is_current: bool = False
    is_visible: bool = False
    is_modifiable: bool = True
    is_modified: bool = False
    icon: str = ""
    diagnostics: int = 0


@dataclass
class GroupInfo:
    id: int
    is_active: bool = False
    # ids shown by the group's windows, in window order; may repeat
    window_item_ids: List[int] = field(default_factory=list)


class ItemSource(Protocol):
    def list_documents(self) -> List[DocumentInfo]:
        ...


class GroupSource(Protocol):
    def list_groups(self) -> List[GroupInfo]:
        ...


class ClickDispatch(Protocol):
    def has_item(self, item_id: int) -> bool:
        ...

    def select_item(self, item_id: int) -> bool:
        ...

    def focus_item_window(self, item_id: int) -> bool:
        ...

    def close_item(self, item_id: int) -> bool:
        ...

    def select_group(self, group_id: int) -> bool:
        ...
