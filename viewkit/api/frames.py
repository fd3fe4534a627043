"""Public frame-callback scheduling contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

FrameCallback = Callable[[], None]


@dataclass(frozen=True, slots=True)
class FrameHandle:
    """Opaque pending frame-callback token."""

    id: int


class FrameScheduler(Protocol):
    """Platform frame-callback primitive (one callback per request)."""

    def request_frame(self, callback: FrameCallback) -> FrameHandle:
        """Run `callback` once on the next rendered frame."""

    def cancel_frame(self, handle: FrameHandle) -> None:
        """Drop a pending callback; unknown or fired handles are ignored."""
