"""Secondary row: one clickable label per group (workspace tab)."""

from typing import List, Optional, Sequence

from bufferline.application.ports import ClickDispatch, GroupInfo
from bufferline.core.clickable import handle_group_click, left_click_handler
from bufferline.core.highlights import Highlights
from bufferline.core.models import Group
from bufferline.util.display import display_width

PADDING = " "


def render_group(group_info: GroupInfo, highlights: Highlights, dispatch: Optional[ClickDispatch] = None) -> Group:
    style = highlights.tab_selected if group_info.is_active else highlights.tab
    name = f"{PADDING}{group_info.id}{PADDING}"
    if dispatch is not None:
        group_id = group_info.id
        fragment = (style, name, left_click_handler(lambda: handle_group_click(dispatch, group_id)))
    else:
        fragment = (style, name)
    return Group(
        id=group_info.id,
        fragments=[fragment],
        width=display_width(name),
        is_active=group_info.is_active,
        item_ids=list(group_info.window_item_ids),
    )


def render_groups(
    group_infos: Sequence[GroupInfo], highlights: Highlights, dispatch: Optional[ClickDispatch] = None
) -> List[Group]:
    return [render_group(info, highlights, dispatch) for info in group_infos]


__all__ = ["render_group", "render_groups"]
