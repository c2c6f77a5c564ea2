import pytest

from hyperblow.trackers import tracker_viewport_start, visible_tracker_indexes


def test_tracker_viewport_keeps_last_item_reachable():
    assert tracker_viewport_start(12, 13, 6) == 7


def test_scrolled_selection_shows_last_tracker():
    # 13 trackers in a 6-row viewport, selection moved down to the last one
    shown = visible_tracker_indexes(12, 13, 6)
    assert list(shown) == [7, 8, 9, 10, 11, 12]
    assert 12 in shown


def test_no_scroll_while_selection_fits():
    assert tracker_viewport_start(0, 13, 6) == 0
    assert tracker_viewport_start(5, 13, 6) == 0
    assert tracker_viewport_start(6, 13, 6) == 1


def test_empty_list_or_viewport_starts_at_zero():
    assert tracker_viewport_start(3, 0, 6) == 0
    assert tracker_viewport_start(3, 10, 0) == 0
    assert list(visible_tracker_indexes(3, 10, 0)) == []
    assert list(visible_tracker_indexes(0, 0, 6)) == []


def test_fewer_rows_than_viewport_show_all():
    assert tracker_viewport_start(2, 3, 6) == 0
    assert list(visible_tracker_indexes(2, 3, 6)) == [0, 1, 2]


def test_selection_beyond_end_is_capped_at_max_start():
    assert tracker_viewport_start(50, 13, 6) == 7
    assert list(visible_tracker_indexes(50, 13, 6)) == [7, 8, 9, 10, 11, 12]


@pytest.mark.parametrize("selected", range(13))
def test_selected_row_is_always_visible(selected):
    shown = visible_tracker_indexes(selected, 13, 6)
    assert selected in shown
    assert len(shown) == 6


def test_negative_values_are_rejected():
    with pytest.raises(ValueError):
        tracker_viewport_start(-1, 13, 6)
    with pytest.raises(ValueError):
        visible_tracker_indexes(0, 13, -2)