"""Qt-backed frame-callback scheduler."""

from __future__ import annotations

from viewkit.api.frames import FrameCallback, FrameHandle
from viewkit.runtime.errors import tolerate_teardown
from viewkit.runtime.logging import get_viewkit_logger

try:
    from PyQt6.QtCore import QObject, QTimer
except ImportError as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

logger = get_viewkit_logger(__name__)


class QtFrameScheduler:
    """Runs each requested callback once, one frame interval later."""

    def __init__(self, interval_ms: float = 16.0, parent: QObject | None = None) -> None:
        self._interval_ms = max(0, int(round(interval_ms)))
        self._parent = parent
        self._next_id = 1
        self._timers: dict[int, QTimer] = {}

    @property
    def pending_count(self) -> int:
        return len(self._timers)

    def request_frame(self, callback: FrameCallback) -> FrameHandle:
        task_id = self._next_id
        self._next_id += 1
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(self._interval_ms)
        timer.timeout.connect(lambda: self._fire(task_id, callback))
        self._timers[task_id] = timer
        timer.start()
        return FrameHandle(task_id)

    def cancel_frame(self, handle: FrameHandle) -> None:
        timer = self._timers.pop(handle.id, None)
        if timer is not None:
            self._dispose(timer)

    def shutdown(self) -> None:
        """Stop every pending timer."""
        timers = list(self._timers.values())
        self._timers.clear()
        for timer in timers:
            self._dispose(timer)

    def _fire(self, task_id: int, callback: FrameCallback) -> None:
        timer = self._timers.pop(task_id, None)
        if timer is None:
            return
        timer.deleteLater()
        callback()

    def _dispose(self, timer: QTimer) -> None:
        with tolerate_teardown(logger, "frame timer"):
            timer.stop()
            timer.deleteLater()
