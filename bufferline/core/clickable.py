"""Clickable regions and the click handlers they route back to."""

from typing import Callable, List, Optional

from prompt_toolkit.mouse_events import MouseButton, MouseEvent, MouseEventType

from bufferline.application.ports import ClickDispatch
from bufferline.core.models import Fragment
from bufferline.core.options import VIEW_MULTIWINDOW


def handle_click(dispatch: ClickDispatch, item_id: Optional[int]) -> bool:
    """Select the item; stale or closed ids are ignored."""
    if item_id is None or not dispatch.has_item(item_id):
        return False
    return bool(dispatch.select_item(item_id))


def handle_win_click(dispatch: ClickDispatch, item_id: Optional[int]) -> bool:
    """Focus the window currently showing the item."""
    if item_id is None or not dispatch.has_item(item_id):
        return False
    return bool(dispatch.focus_item_window(item_id))


def handle_close_item(dispatch: ClickDispatch, item_id: Optional[int]) -> bool:
    if item_id is None or not dispatch.has_item(item_id):
        return False
    return bool(dispatch.close_item(item_id))


def handle_group_click(dispatch: ClickDispatch, group_id: int) -> bool:
    return bool(dispatch.select_group(group_id))


def left_click_handler(action: Callable[[], object]):
    """Wrap an action into a prompt_toolkit mouse handler reacting to left clicks."""

    def handler(event: MouseEvent):
        if event.event_type == MouseEventType.MOUSE_UP and event.button == MouseButton.LEFT:
            action()
            return None
        return NotImplemented

    return handler


def with_handler(fragments: List[Fragment], handler) -> List[Fragment]:
    if handler is None:
        return [(fragment[0], fragment[1]) for fragment in fragments]
    return [(fragment[0], fragment[1], handler) for fragment in fragments]


def make_clickable(
    mode: str, fragments: List[Fragment], item_id: int, dispatch: Optional[ClickDispatch]
) -> List[Fragment]:
    """Attach the select (or window focus, in multiwindow view) handler to fragments."""
    if dispatch is None:
        return list(fragments)
    action = handle_win_click if mode == VIEW_MULTIWINDOW else handle_click
    return with_handler(fragments, left_click_handler(lambda: action(dispatch, item_id)))


__all__ = [
    "handle_click",
    "handle_win_click",
    "handle_close_item",
    "handle_group_click",
    "left_click_handler",
    "with_handler",
    "make_clickable",
]
