"""bufferline - width-budgeted strip of open documents for prompt_toolkit hosts."""

__version__ = "0.1.0"

from .application.tabline_service import go_to_item, render_tabline
from .core.highlights import Highlights
from .core.models import Group, Item, Tabline
from .core.options import BufferlineOptions
from .infrastructure.workspace import Workspace

__all__ = [
    "BufferlineOptions",
    "Group",
    "Highlights",
    "Item",
    "Tabline",
    "Workspace",
    "go_to_item",
    "render_tabline",
]
