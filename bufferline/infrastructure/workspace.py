"""In-memory host: documents shown in windows, windows arranged in groups."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from bufferline.application.ports import ClickDispatch, DocumentInfo, GroupInfo, GroupSource, ItemSource


@dataclass
class Document:
    id: int
    path: str
    listed: bool = True
    modifiable: bool = True
    modified: bool = False
    icon: str = ""
    diagnostics: int = 0

    @property
    def name(self) -> str:
        return Path(self.path).name if self.path else "[No Name]"


@dataclass
class Window:
    id: int
    document_id: Optional[int] = None


@dataclass
class WorkspaceGroup:
    id: int
    windows: List[Window] = field(default_factory=list)
    focused: int = 0

    @property
    def focused_window(self) -> Optional[Window]:
        if not self.windows:
            return None
        return self.windows[min(self.focused, len(self.windows) - 1)]


class Workspace(ItemSource, GroupSource, ClickDispatch):
    """Implements ItemSource, GroupSource and ClickDispatch over plain Python state."""

    def __init__(self) -> None:
        self.documents: Dict[int, Document] = {}
        self.groups: List[WorkspaceGroup] = []
        self.active_group_index: int = 0
        self._next_document_id = 1
        self._next_window_id = 1000
        self.new_group()

    # ---- state helpers -------------------------------------------------

    def _new_window(self, document_id: Optional[int]) -> Window:
        window = Window(id=self._next_window_id, document_id=document_id)
        self._next_window_id += 1
        return window

    @property
    def active_group(self) -> WorkspaceGroup:
        return self.groups[self.active_group_index]

    @property
    def current_id(self) -> Optional[int]:
        window = self.active_group.focused_window
        return window.document_id if window else None

    def is_valid(self, item_id: Optional[int]) -> bool:
        if not item_id or item_id < 1:
            return False
        doc = self.documents.get(item_id)
        return bool(doc and doc.listed)

    def valid_ids(self) -> List[int]:
        return [doc_id for doc_id in self.documents if self.is_valid(doc_id)]

    # ---- mutations -----------------------------------------------------

    def open_document(self, path: str = "", *, listed: bool = True, modifiable: bool = True, icon: str = "") -> int:
        doc = Document(id=self._next_document_id, path=path, listed=listed, modifiable=modifiable, icon=icon)
        self._next_document_id += 1
        self.documents[doc.id] = doc
        window = self.active_group.focused_window
        if window is not None:
            window.document_id = doc.id
        return doc.id

    def set_modified(self, item_id: int, modified: bool = True) -> bool:
        doc = self.documents.get(item_id)
        if doc is None or not doc.modifiable:
            return False
        doc.modified = modified
        return True

    def set_diagnostics(self, item_id: int, count: int) -> bool:
        doc = self.documents.get(item_id)
        if doc is None:
            return False
        doc.diagnostics = max(0, int(count))
        return True

    def split_window(self) -> Window:
        group = self.active_group
        window = self._new_window(self.current_id)
        group.windows.insert(group.focused + 1, window)
        group.focused += 1
        return window

    def new_group(self) -> WorkspaceGroup:
        group = WorkspaceGroup(id=len(self.groups) + 1)
        current = self.current_id if self.groups else None
        group.windows.append(self._new_window(current))
        self.groups.append(group)
        self.active_group_index = len(self.groups) - 1
        return group

    def cycle(self, delta: int) -> bool:
        ids = self.valid_ids()
        if not ids:
            return False
        current = self.current_id
        index = ids.index(current) if current in ids else -delta
        return self.select_item(ids[(index + delta) % len(ids)])

    # ---- ClickDispatch -------------------------------------------------

    def has_item(self, item_id: int) -> bool:
        return self.is_valid(item_id)

    def select_item(self, item_id: int) -> bool:
        if not self.is_valid(item_id):
            return False
        window = self.active_group.focused_window
        if window is None:
            return False
        window.document_id = item_id
        return True

    def focus_item_window(self, item_id: int) -> bool:
        group = self.active_group
        for index, window in enumerate(group.windows):
            if window.document_id == item_id:
                group.focused = index
                return True
        return False

    def close_item(self, item_id: int) -> bool:
        if item_id not in self.documents:
            return False
        del self.documents[item_id]
        remaining = self.valid_ids()
        fallback = remaining[0] if remaining else None
        for group in self.groups:
            for window in group.windows:
                if window.document_id == item_id:
                    window.document_id = fallback
        return True

    def select_group(self, group_id: int) -> bool:
        for index, group in enumerate(self.groups):
            if group.id == group_id:
                self.active_group_index = index
                return True
        return False

    # ---- ItemSource / GroupSource --------------------------------------

    def list_documents(self) -> List[DocumentInfo]:
        group = self.active_group
        current = self.current_id
        shown = {window.document_id for window in group.windows}
        return [
            DocumentInfo(
                id=doc.id,
                name=doc.name,
                is_current=doc.id == current,
                is_visible=doc.id != current and doc.id in shown,
                is_modifiable=doc.modifiable,
                is_modified=doc.modified,
                icon=doc.icon,
                diagnostics=doc.diagnostics,
            )
            for doc in self.documents.values()
            if self.is_valid(doc.id)
        ]

    def list_groups(self) -> List[GroupInfo]:
        return [
            GroupInfo(
                id=group.id,
                is_active=index == self.active_group_index,
                window_item_ids=[w.document_id for w in group.windows if w.document_id is not None],
            )
            for index, group in enumerate(self.groups)
        ]


__all__ = ["Document", "Window", "WorkspaceGroup", "Workspace"]
