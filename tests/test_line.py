import logging

from bufferline.core.highlights import DEFAULT_HIGHLIGHTS as HL
from bufferline.core.line import (
    MAX_LINE_UNITS,
    assemble_line,
    coalesce_units,
    marker_element_sizes,
    render_trunc_marker,
    visible_groups,
)
from bufferline.core.models import Group
from bufferline.core.options import BufferlineOptions
from bufferline.core.sections import Marker
from bufferline.util.display import display_width, fragments_width

OPTIONS = BufferlineOptions(close_icon="X", left_trunc_marker="<", right_trunc_marker=">")


def _group(group_id, active=False):
    style = HL.tab_selected if active else HL.tab
    return Group(id=group_id, fragments=[(style, f" {group_id} ")], width=3, is_active=active)


def test_empty_line_is_fill_plus_close():
    line = assemble_line([], Marker(), [], 20, OPTIONS, HL)
    assert len(line.units) == 2
    fill, close = line.units
    assert fill == [(HL.fill, " " * 17)]
    assert close == [(HL.close, " X ")]
    assert line.width == 20
    assert (line.left_dropped, line.right_dropped) == (0, 0)


def test_marker_sizes_match_rendered_markers():
    left, right = marker_element_sizes("<", ">")
    left_text = render_trunc_marker(12, "<", HL.background, " ")[0][1]
    right_text = render_trunc_marker(12, ">", HL.background)[0][1]
    assert display_width(left_text) == left + display_width("12")
    assert display_width(right_text) == right + display_width("12")


def test_markers_wrap_fitted_segments():
    fitted = [[("s", "aaa")], [("s", "bbb")]]
    marker = Marker(left_dropped=2, right_dropped=1)
    line = assemble_line(fitted, marker, [], 40, OPTIONS, HL)
    assert line.units[0] == [(HL.background, " 2 <  ")]
    assert line.units[1:3] == fitted
    assert line.units[3] == [(HL.background, " 1 > ")]
    assert line.text.startswith(" 2 <  aaabbb 1 > ")
    assert line.text.endswith(" X ")
    assert (line.left_dropped, line.right_dropped) == (2, 1)


def test_single_group_row_is_hidden():
    line = assemble_line([], Marker(), [_group(1, True)], 20, OPTIONS, HL)
    assert " 1 " not in line.text.strip()
    assert len(line.units) == 2


def test_group_row_sits_between_fill_and_close():
    groups = [_group(1, True), _group(2)]
    line = assemble_line([[("s", "doc")]], Marker(), groups, 30, OPTIONS, HL)
    assert line.units[-3] == [(HL.tab_selected, " 1 ")]
    assert line.units[-2] == [(HL.tab, " 2 ")]
    assert line.units[-4][0][0] == HL.fill
    assert line.width == 30


def test_fill_never_negative_when_overflowing():
    line = assemble_line([[("s", "x" * 50)]], Marker(), [], 10, OPTIONS, HL)
    assert line.units[1] == [(HL.fill, "")]


def test_visible_groups():
    assert visible_groups([]) == []
    assert visible_groups([_group(1)]) == []
    assert len(visible_groups([_group(1), _group(2)])) == 2


def test_coalesce_units_respects_ceiling(caplog):
    handler = lambda event: None  # noqa: E731
    units = [[("s", str(i), handler)] for i in range(100)]
    with caplog.at_level(logging.WARNING, logger="bufferline.line"):
        merged = coalesce_units(units)
    assert len(merged) == MAX_LINE_UNITS
    assert merged[-1] == units[-1]
    assert all(len(frag) == 2 for frag in merged[-2])
    assert fragments_width([f for u in merged for f in u]) == fragments_width([f for u in units for f in u])
    assert "atomic units" in caplog.text


def test_coalesce_units_noop_under_ceiling():
    units = [[("s", "a")], [("s", "b")]]
    assert coalesce_units(units) is units


def test_many_groups_stay_under_unit_ceiling():
    groups = [_group(i, i == 1) for i in range(1, 120)]
    line = assemble_line([], Marker(), groups, 400, OPTIONS, HL)
    assert len(line.units) <= MAX_LINE_UNITS
    assert line.units[-1] == [(HL.close, " X ")]
