"""Stateful windowing controller bound to one scroll container."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass

from viewkit.api.events import Subscription
from viewkit.api.frames import FrameScheduler
from viewkit.api.viewport import ScrollContainer, SizeObserver, SizeObserverFactory
from viewkit.runtime.events import ChangeNotifier
from viewkit.runtime.frames import CoalescedFrameTask
from viewkit.runtime.logging import get_viewkit_logger
from viewkit.ui_runtime.windowing import DEFAULT_OVERSCAN, WindowResult, compute_window

logger = get_viewkit_logger(__name__)


@dataclass(frozen=True, slots=True)
class ViewportState:
    scroll_offset: float = 0.0
    viewport_height: float = 0.0


@dataclass(frozen=True, slots=True)
class WindowChanged[T]:
    """Published when the materialized window differs from the previous one."""

    window: WindowResult[T]
    viewport: ViewportState


class VirtualListController[T]:
    """Keeps a `WindowResult` current for a mounted scroll container.

    Scroll events are coalesced to one recompute per frame; size changes and
    input changes recompute immediately. Nothing is observed or scheduled
    outside `mount()`/`unmount()`.
    """

    def __init__(
        self,
        items: Sequence[T],
        *,
        item_height: float,
        container: ScrollContainer,
        frame_scheduler: FrameScheduler,
        observe_size: SizeObserverFactory,
        overscan: int = DEFAULT_OVERSCAN,
        trace: bool = False,
    ) -> None:
        self._items = items
        self._item_height = item_height
        self._overscan = overscan
        self._container = container
        self._observe_size = observe_size
        self._scroll_task = CoalescedFrameTask(frame_scheduler)
        self._size_observer: SizeObserver | None = None
        self._viewport = ViewportState()
        self._mounted = False
        self._trace = trace
        self._changes: ChangeNotifier[WindowChanged[T]] = ChangeNotifier()
        self._window: WindowResult[T] = self._compute()

    @property
    def window(self) -> WindowResult[T]:
        return self._window

    @property
    def viewport(self) -> ViewportState:
        return self._viewport

    @property
    def items(self) -> Sequence[T]:
        return self._items

    @property
    def item_height(self) -> float:
        return self._item_height

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def scroll_pending(self) -> bool:
        return self._scroll_task.pending

    def mount(self) -> VirtualListController[T]:
        """Read initial geometry synchronously and start observing size."""
        if self._mounted:
            return self
        self._mounted = True
        self._viewport = ViewportState(
            scroll_offset=self._container.scroll_offset(),
            viewport_height=self._container.viewport_height(),
        )
        self._size_observer = self._observe_size(self._on_height)
        self._recompute()
        return self

    def unmount(self) -> None:
        """Cancel pending frame work and stop size observation."""
        if not self._mounted:
            return
        self._mounted = False
        self._scroll_task.cancel()
        observer = self._size_observer
        self._size_observer = None
        if observer is not None:
            observer.disconnect()

    @contextmanager
    def mounted(self) -> Iterator[VirtualListController[T]]:
        self.mount()
        try:
            yield self
        finally:
            self.unmount()

    def on_scroll(self) -> None:
        """Container scrolled; recompute on the next frame with the latest offset."""
        if not self._mounted:
            return
        self._scroll_task.schedule(self._apply_scroll)

    def set_items(self, items: Sequence[T]) -> None:
        self._items = items
        self._recompute()

    def set_item_height(self, item_height: float) -> None:
        if item_height == self._item_height:
            return
        self._item_height = item_height
        self._recompute()

    def set_overscan(self, overscan: int) -> None:
        if overscan == self._overscan:
            return
        self._overscan = overscan
        self._recompute()

    def subscribe(self, handler: Callable[[WindowChanged[T]], None]) -> Subscription:
        return self._changes.subscribe(handler)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._changes.unsubscribe(subscription)

    def _apply_scroll(self) -> None:
        if not self._mounted:
            return
        offset = self._container.scroll_offset()
        if offset == self._viewport.scroll_offset:
            return
        self._viewport = ViewportState(scroll_offset=offset, viewport_height=self._viewport.viewport_height)
        self._recompute()

    def _on_height(self, height: float) -> None:
        if not self._mounted or height == self._viewport.viewport_height:
            return
        self._viewport = ViewportState(scroll_offset=self._viewport.scroll_offset, viewport_height=height)
        self._recompute()

    def _compute(self) -> WindowResult[T]:
        return compute_window(
            self._items,
            self._item_height,
            self._viewport.viewport_height,
            self._viewport.scroll_offset,
            self._overscan,
        )

    def _recompute(self) -> None:
        window = self._compute()
        if window == self._window:
            return
        self._window = window
        if self._trace:
            logger.debug(
                "window recomputed start=%d end=%d offset_top=%.1f total=%.1f",
                window.start_index,
                window.end_index,
                window.offset_top,
                window.total_height,
            )
        self._changes.notify(WindowChanged(window=window, viewport=self._viewport))
