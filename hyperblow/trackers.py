"""Scrolling of the tracker list in the trackers tab."""

from __future__ import annotations

__all__ = ["tracker_viewport_start", "visible_tracker_indexes"]


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


def tracker_viewport_start(selected_index: int, total_rows: int, visible_rows: int) -> int:
    """First row to show so that ``selected_index`` stays on screen.

    The viewport scrolls only as far as needed to keep the selection on its
    last visible line, and never past the point where the final row would
    leave empty space below it.
    """
    _check_non_negative(
        selected_index=selected_index, total_rows=total_rows, visible_rows=visible_rows
    )
    if total_rows == 0 or visible_rows == 0:
        return 0
    max_start = max(total_rows - visible_rows, 0)
    return min(max(selected_index + 1 - visible_rows, 0), max_start)


def visible_tracker_indexes(selected_index: int, total_rows: int, visible_rows: int) -> range:
    """Indexes of the tracker rows shown in a viewport of ``visible_rows`` lines."""
    start = tracker_viewport_start(selected_index, total_rows, visible_rows)
    return range(start, min(start + visible_rows, total_rows))