from types import SimpleNamespace

from prompt_toolkit.mouse_events import MouseButton, MouseEventType

from bufferline.core.segment import SegmentRecord


def click_event(event_type=MouseEventType.MOUSE_UP, button=MouseButton.LEFT):
    return SimpleNamespace(event_type=event_type, button=button, position=SimpleNamespace(x=0, y=0), modifiers=())


def fake_record(item_id, width, is_current=False):
    """Record whose body spans width - 1 cells followed by a 1-cell separator."""
    body = (("", str(item_id % 10) * (width - 1)),)
    return SegmentRecord(item_id=item_id, body=body, separator=("class:sep", "|"), width=width, is_current=is_current)


def handlers_in(units):
    return [frag[2] for unit in units for frag in unit if len(frag) == 3]
