"""Visible-range computation for fixed-height virtualized lists."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_OVERSCAN = 3


@dataclass(frozen=True, slots=True)
class WindowResult[T]:
    """Materialized slice of a list plus the geometry to place it.

    `visible_items` is exactly `items[start_index:end_index]`, `total_height`
    sizes the scroll spacer and `offset_top` positions the first row.
    """

    visible_items: tuple[T, ...]
    start_index: int
    end_index: int
    total_height: float
    offset_top: float

    @property
    def visible_count(self) -> int:
        return self.end_index - self.start_index


def empty_window[T]() -> WindowResult[T]:
    return WindowResult(visible_items=(), start_index=0, end_index=0, total_height=0.0, offset_top=0.0)


def compute_window[T](
    items: Sequence[T],
    item_height: float,
    viewport_height: float,
    scroll_offset: float,
    overscan: int = DEFAULT_OVERSCAN,
) -> WindowResult[T]:
    """Return the rows intersecting the viewport, padded by `overscan` rows."""
    if not _positive(item_height):
        return empty_window()
    count = len(items)
    pad = _overscan_rows(overscan)
    total_height = count * item_height

    if not math.isfinite(viewport_height) or viewport_height <= 0:
        # Not laid out yet: paint a first screenful so the surface is not blank.
        end_index = min(pad * 2, count)
        return WindowResult(
            visible_items=tuple(items[:end_index]),
            start_index=0,
            end_index=end_index,
            total_height=total_height,
            offset_top=0.0,
        )

    offset = scroll_offset if math.isfinite(scroll_offset) else 0.0
    offset = max(0.0, offset)
    rows_above = offset / item_height
    rows_in_view = viewport_height / item_height
    if not (math.isfinite(rows_above) and math.isfinite(rows_in_view)):
        return empty_window()
    start_index = min(count, max(0, math.floor(rows_above) - pad))
    visible_count = math.ceil(rows_in_view)
    end_index = min(count, start_index + visible_count + pad * 2)
    return WindowResult(
        visible_items=tuple(items[start_index:end_index]),
        start_index=start_index,
        end_index=end_index,
        total_height=total_height,
        offset_top=start_index * item_height,
    )


def index_at_offset(offset: float, item_height: float, item_count: int) -> int | None:
    """Return the row index under a content-space y offset, if any."""
    if not _positive(item_height) or not math.isfinite(offset) or offset < 0:
        return None
    rows = offset / item_height
    if not math.isfinite(rows) or rows >= item_count:
        return None
    return math.floor(rows)


def _positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def _overscan_rows(overscan: float) -> int:
    if isinstance(overscan, float) and not math.isfinite(overscan):
        return 0
    return max(0, int(overscan))
