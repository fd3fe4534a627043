"""Frame-callback scheduling and per-frame coalescing."""

from __future__ import annotations

from dataclasses import dataclass

from viewkit.api.frames import FrameCallback, FrameHandle, FrameScheduler


@dataclass(slots=True)
class _FrameTask:
    task_id: int
    frame_index: int
    callback: FrameCallback


class ManualFrameScheduler:
    """Deterministic frame scheduler advanced explicitly by its owner."""

    def __init__(self) -> None:
        self._frame_index = 0
        self._next_task_id = 1
        self._tasks: dict[int, _FrameTask] = {}

    @property
    def frame_index(self) -> int:
        return self._frame_index

    @property
    def pending_count(self) -> int:
        """Return count of callbacks still waiting for a frame."""
        return len(self._tasks)

    def request_frame(self, callback: FrameCallback) -> FrameHandle:
        """Queue a one-shot callback for the next frame."""
        task_id = self._next_task_id
        self._next_task_id += 1
        self._tasks[task_id] = _FrameTask(
            task_id=task_id,
            frame_index=self._frame_index + 1,
            callback=callback,
        )
        return FrameHandle(task_id)

    def cancel_frame(self, handle: FrameHandle) -> None:
        """Drop a pending callback; unknown or already-run handles are ignored."""
        self._tasks.pop(handle.id, None)

    def run_frame(self) -> int:
        """Advance one frame and run the callbacks due on it.

        Callbacks requested while the frame is running are due on the
        following frame.
        """
        self._frame_index += 1
        executed = 0
        for task_id in sorted(self._tasks):
            task = self._tasks.get(task_id)
            if task is None or task.frame_index > self._frame_index:
                continue
            del self._tasks[task_id]
            task.callback()
            executed += 1
        return executed


class CoalescedFrameTask:
    """At most one pending frame callback; a new request replaces the old one."""

    def __init__(self, scheduler: FrameScheduler) -> None:
        self._scheduler = scheduler
        self._handle: FrameHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, callback: FrameCallback) -> FrameHandle:
        """Cancel any pending callback and request `callback` for the next frame."""
        self.cancel()
        handle: FrameHandle | None = None

        def _fire() -> None:
            if self._handle == handle:
                self._handle = None
            callback()

        handle = self._scheduler.request_frame(_fire)
        self._handle = handle
        return handle

    def cancel(self) -> None:
        """Release the pending callback, if any."""
        if self._handle is None:
            return
        handle = self._handle
        self._handle = None
        self._scheduler.cancel_frame(handle)
