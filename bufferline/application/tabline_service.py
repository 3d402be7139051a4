"""Render orchestration: host state in, one fitted tabline out."""

import logging
from typing import List, Optional, Sequence, Tuple

from bufferline.application.ports import ClickDispatch, DocumentInfo, GroupInfo, GroupSource, ItemSource
from bufferline.core.clickable import handle_click, handle_close_item, left_click_handler
from bufferline.core.groups import render_groups
from bufferline.core.highlights import DEFAULT_HIGHLIGHTS, Highlights
from bufferline.core.line import PADDING, assemble_line, marker_element_sizes, visible_groups
from bufferline.core.models import Item, Tabline
from bufferline.core.options import VIEW_DEFAULT, VIEW_MULTIWINDOW, BufferlineOptions
from bufferline.core.sections import Marker, split_sections
from bufferline.core.segment import render_segment
from bufferline.core.truncation import fit_sections
from bufferline.util.display import display_width

logger = logging.getLogger("bufferline.render")


def filter_duplicates(ids: Sequence[int]) -> List[int]:
    return list(dict.fromkeys(ids))


def documents_for_view(
    view: str,
    documents: List[DocumentInfo],
    groups: Sequence[GroupInfo],
) -> Tuple[List[DocumentInfo], str]:
    """Pick the documents to list and the click mode for them.

    In multiwindow view, a group that splits several document windows only
    lists the documents it shows. Single-group setups and single-window groups
    fall back to the full list.
    """
    if view == VIEW_MULTIWINDOW and len(groups) > 1:
        active = next((group for group in groups if group.is_active), None)
        if active is not None:
            by_id = {doc.id: doc for doc in documents}
            shown = [item_id for item_id in active.window_item_ids if item_id in by_id]
            if len(shown) > 1:
                return [by_id[item_id] for item_id in filter_duplicates(shown)], VIEW_MULTIWINDOW
    return list(documents), VIEW_DEFAULT


def build_items(documents: Sequence[DocumentInfo]) -> List[Item]:
    return [
        Item(
            id=doc.id,
            name=doc.name,
            ordinal=index,
            is_current=doc.is_current,
            is_visible=doc.is_visible,
            is_modifiable=doc.is_modifiable,
            is_modified=doc.is_modified,
            icon=doc.icon,
            diagnostics=doc.diagnostics,
        )
        for index, doc in enumerate(documents, start=1)
    ]


def render_tabline(
    options: BufferlineOptions,
    item_source: ItemSource,
    group_source: Optional[GroupSource] = None,
    dispatch: Optional[ClickDispatch] = None,
    columns: int = 80,
    highlights: Highlights = DEFAULT_HIGHLIGHTS,
) -> Tabline:
    group_infos = group_source.list_groups() if group_source is not None else []
    documents, click_mode = documents_for_view(options.view, item_source.list_documents(), group_infos)

    records = [
        render_segment(item, options, highlights, options.max_name_length, dispatch, click_mode)
        for item in build_items(documents)
    ]
    groups = render_groups(group_infos, highlights, dispatch)

    close_width = display_width(PADDING + options.close_icon + PADDING)
    groups_width = sum(group.width for group in visible_groups(groups))
    available_width = columns - groups_width - close_width

    left_size, right_size = marker_element_sizes(options.left_trunc_marker, options.right_trunc_marker)
    marker = Marker(left_element_size=left_size, right_element_size=right_size)
    before, current, after = split_sections(records)
    fitted = fit_sections(before, current, after, available_width, marker)

    current_id: Optional[int] = current.records[0].item_id if current.records else None
    close_handler = None
    if dispatch is not None and current_id is not None:
        close_handler = left_click_handler(lambda: handle_close_item(dispatch, current_id))

    logger.debug(
        "Rendered %d of %d items in %d columns (dropped %d left, %d right)",
        len(fitted),
        len(records),
        columns,
        marker.left_dropped,
        marker.right_dropped,
    )
    return assemble_line(fitted, marker, groups, columns, options, highlights, close_handler, current_id)


def go_to_item(num: int, item_source: ItemSource, dispatch: ClickDispatch) -> bool:
    """Select the num-th (1-based) item of the full listing; out of range is a no-op."""
    documents = item_source.list_documents()
    if 1 <= num <= len(documents):
        return handle_click(dispatch, documents[num - 1].id)
    return False


__all__ = ["render_tabline", "go_to_item", "documents_for_view", "build_items", "filter_duplicates"]
