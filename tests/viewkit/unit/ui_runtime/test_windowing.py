from __future__ import annotations

import math

import pytest

from viewkit.ui_runtime.windowing import (
    compute_window,
    empty_window,
    index_at_offset,
)


def test_compute_window_at_top_pads_only_downwards() -> None:
    items = list(range(100))
    window = compute_window(items, item_height=10.0, viewport_height=50.0, scroll_offset=0.0, overscan=3)

    assert window.start_index == 0
    assert window.end_index == 11
    assert window.visible_items == tuple(range(11))
    assert window.total_height == 1000.0
    assert window.offset_top == 0.0


def test_compute_window_mid_list_pads_both_directions() -> None:
    items = list(range(100))
    window = compute_window(items, item_height=10.0, viewport_height=50.0, scroll_offset=205.0, overscan=3)

    assert window.start_index == 17
    assert window.end_index == 28
    assert window.visible_items == tuple(items[17:28])
    assert window.offset_top == 170.0
    assert window.visible_count == 11


def test_compute_window_clamps_end_to_item_count() -> None:
    items = list(range(20))
    window = compute_window(items, item_height=10.0, viewport_height=50.0, scroll_offset=150.0, overscan=3)

    assert window.start_index == 12
    assert window.end_index == 20
    assert window.visible_items == tuple(range(12, 20))


def test_compute_window_partial_rows_round_up() -> None:
    window = compute_window(list(range(50)), item_height=40.0, viewport_height=90.0, scroll_offset=0.0, overscan=0)

    assert window.end_index == 3


@pytest.mark.parametrize(("count", "overscan", "expected"), [(100, 3, 6), (4, 3, 4), (0, 3, 0), (10, 0, 0)])
def test_compute_window_unmeasured_viewport_uses_fallback(count: int, overscan: int, expected: int) -> None:
    items = list(range(count))
    window = compute_window(items, item_height=10.0, viewport_height=0.0, scroll_offset=500.0, overscan=overscan)

    assert window.start_index == 0
    assert window.end_index == expected
    assert len(window.visible_items) == expected
    assert window.offset_top == 0.0
    assert window.total_height == count * 10.0


def test_compute_window_empty_items() -> None:
    window = compute_window([], item_height=10.0, viewport_height=100.0, scroll_offset=40.0)

    assert window == empty_window()


@pytest.mark.parametrize("item_height", [0.0, -5.0, math.nan, math.inf])
def test_compute_window_invalid_item_height_shows_nothing(item_height: float) -> None:
    window = compute_window(list(range(10)), item_height=item_height, viewport_height=100.0, scroll_offset=0.0)

    assert window.visible_items == ()
    assert window.start_index == window.end_index == 0
    assert window.total_height == 0.0


@pytest.mark.parametrize(
    ("item_height", "viewport_height", "scroll_offset"),
    [(1e-308, 100.0, 50.0), (1e-308, 100.0, 0.0), (5e-324, 1e308, 0.0)],
)
def test_compute_window_row_count_overflow_shows_nothing(
    item_height: float, viewport_height: float, scroll_offset: float
) -> None:
    window = compute_window(
        list(range(10)), item_height=item_height, viewport_height=viewport_height, scroll_offset=scroll_offset
    )

    assert window.visible_items == ()
    assert window.start_index == window.end_index == 0


@pytest.mark.parametrize("overscan", [math.nan, math.inf, -math.inf])
def test_compute_window_non_finite_overscan_counts_as_zero(overscan: float) -> None:
    window = compute_window(
        list(range(10)), item_height=10.0, viewport_height=30.0, scroll_offset=20.0, overscan=overscan
    )

    assert (window.start_index, window.end_index) == (2, 5)
    assert window.visible_items == (2, 3, 4)


def test_compute_window_scroll_past_end_keeps_bounds() -> None:
    window = compute_window(list(range(10)), item_height=10.0, viewport_height=30.0, scroll_offset=10_000.0, overscan=2)

    assert window.start_index == 10
    assert window.end_index == 10
    assert window.visible_items == ()
    assert window.offset_top == 100.0


def test_compute_window_negative_inputs_are_clamped() -> None:
    window = compute_window(list(range(30)), item_height=10.0, viewport_height=20.0, scroll_offset=-50.0, overscan=-4)

    assert window.start_index == 0
    assert window.end_index == 2


def test_compute_window_bounds_and_offsets_hold_across_scroll_positions() -> None:
    items = list(range(137))
    previous_start = 0
    for step in range(0, 2000, 7):
        window = compute_window(items, item_height=12.0, viewport_height=95.0, scroll_offset=float(step), overscan=3)
        assert 0 <= window.start_index <= window.end_index <= len(items)
        assert len(window.visible_items) == window.end_index - window.start_index
        assert window.visible_items == tuple(items[window.start_index : window.end_index])
        assert window.total_height == len(items) * 12.0
        assert window.offset_top == window.start_index * 12.0
        assert window.start_index >= previous_start
        previous_start = window.start_index


def test_index_at_offset_hits_rows_and_misses_outside() -> None:
    assert index_at_offset(0.0, 10.0, 5) == 0
    assert index_at_offset(19.9, 10.0, 5) == 1
    assert index_at_offset(50.0, 10.0, 5) is None
    assert index_at_offset(-1.0, 10.0, 5) is None
    assert index_at_offset(5.0, 0.0, 5) is None
    assert index_at_offset(50.0, 1e-308, 5) is None
