"""List-rendering runtime helpers."""

from viewkit.ui_runtime.selection import (
    ClickMode,
    RangeSelection,
    SelectionChanged,
    SelectionState,
)
from viewkit.ui_runtime.virtual_list import ViewportState, VirtualListController, WindowChanged
from viewkit.ui_runtime.windowing import (
    DEFAULT_OVERSCAN,
    WindowResult,
    compute_window,
    empty_window,
    index_at_offset,
)

__all__ = [
    "DEFAULT_OVERSCAN",
    "ClickMode",
    "RangeSelection",
    "SelectionChanged",
    "SelectionState",
    "ViewportState",
    "VirtualListController",
    "WindowChanged",
    "WindowResult",
    "compute_window",
    "empty_window",
    "index_at_offset",
]
