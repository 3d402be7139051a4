from bufferline.core.sections import Marker, split_sections
from bufferline.core.truncation import fit_sections, total_width

from tests.helpers import fake_record


def _fit(records, budget, left_size=0, right_size=0):
    marker = Marker(left_element_size=left_size, right_element_size=right_size)
    before, current, after = split_sections(records)
    units = fit_sections(before, current, after, budget, marker)
    return units, marker


def _ids(units):
    return [int(unit[0][1][0]) for unit in units]


def test_everything_fits_keeps_order_and_separators():
    records = [fake_record(i, 10, is_current=(i == 2)) for i in (1, 2, 3)]
    units, marker = _fit(records, 30)
    assert _ids(units) == [1, 2, 3]
    assert (marker.left_dropped, marker.right_dropped) == (0, 0)
    assert units[0][-1] == ("class:sep", "|")
    assert units[1][-1] == ("class:sep", "|")
    assert units[2][-1] != ("class:sep", "|")


def test_drops_first_before_item_when_left_is_wider():
    records = [fake_record(1, 20), fake_record(2, 20, is_current=True), fake_record(3, 20)]
    units, marker = _fit(records, 45)
    assert _ids(units) == [2, 3]
    assert marker.left_dropped == 1
    assert marker.right_dropped == 0


def test_tie_drops_from_before():
    records = [fake_record(1, 10), fake_record(2, 10, is_current=True), fake_record(3, 10)]
    units, marker = _fit(records, 25)
    assert _ids(units) == [2, 3]
    assert (marker.left_dropped, marker.right_dropped) == (1, 0)


def test_wider_after_section_is_dropped_whole():
    records = [fake_record(1, 5), fake_record(2, 10, is_current=True), fake_record(3, 10), fake_record(4, 10)]
    units, marker = _fit(records, 20)
    assert _ids(units) == [1, 2]
    assert marker.right_dropped == 2
    assert marker.left_dropped == 0


def test_before_is_trimmed_from_the_far_end():
    records = [fake_record(i, 10) for i in (1, 2, 3, 4)] + [fake_record(5, 10, is_current=True)]
    units, marker = _fit(records, 32)
    assert _ids(units) == [3, 4, 5]
    assert marker.left_dropped == 2


def test_marker_reservation_can_force_extra_drop():
    records = [fake_record(1, 20), fake_record(2, 20, is_current=True), fake_record(3, 20)]
    units, marker = _fit(records, 45, left_size=5)
    # 40 + marker (1 + 5) > 45, so the right side goes too
    assert _ids(units) == [2]
    assert (marker.left_dropped, marker.right_dropped) == (1, 1)


def test_current_survives_any_budget():
    records = [fake_record(1, 10), fake_record(2, 50, is_current=True), fake_record(3, 10)]
    for budget in (0, 5, 49, 50):
        units, marker = _fit(records, budget)
        assert 2 in _ids(units)
        assert marker.left_dropped + marker.right_dropped == 3 - len(units)


def test_current_alone_over_budget_is_rendered_anyway():
    units, marker = _fit([fake_record(1, 30, is_current=True)], 10)
    assert _ids(units) == [1]
    assert (marker.left_dropped, marker.right_dropped) == (0, 0)


def test_drop_counts_match_removed_items():
    for budget in range(0, 120, 3):
        records = [fake_record(i, 7 + i, is_current=(i == 4)) for i in range(1, 9)]
        units, marker = _fit(records, budget, left_size=5, right_size=4)
        assert marker.left_dropped + marker.right_dropped == len(records) - len(units)


def test_fitted_width_respects_budget_when_current_fits():
    for budget in range(18, 90):
        records = [fake_record(i, 6 + i % 4, is_current=(i == 5)) for i in range(1, 10)]
        before, current, after = split_sections(records)
        marker = Marker(left_element_size=5, right_element_size=4)
        fit_sections(before, current, after, budget, marker)
        assert total_width(before, current, after, marker) <= budget


def test_no_current_item_trims_before_only():
    units, marker = _fit([fake_record(i, 10) for i in (1, 2, 3)], 15)
    assert _ids(units) == [3]
    assert marker.left_dropped == 2


def test_empty_input_and_zero_width():
    units, marker = _fit([], 0)
    assert units == []
    assert (marker.left_dropped, marker.right_dropped) == (0, 0)


def test_running_twice_is_identical():
    records = [fake_record(i, 9, is_current=(i == 3)) for i in range(1, 7)]
    first, first_marker = _fit(records, 31, left_size=5, right_size=4)
    second, second_marker = _fit(records, 31, left_size=5, right_size=4)
    assert first == second
    assert (first_marker.left_dropped, first_marker.right_dropped) == (
        second_marker.left_dropped,
        second_marker.right_dropped,
    )
