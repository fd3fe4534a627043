"""Scroll container and size observation ports."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

HeightCallback = Callable[[float], None]


class ScrollContainer(Protocol):
    """Read-only geometry of a scrollable list container."""

    def scroll_offset(self) -> float:
        """Return pixels scrolled from the top."""

    def viewport_height(self) -> float:
        """Return the currently laid-out viewport height in pixels."""


class SizeObserver(Protocol):
    """Active size observation handle."""

    def disconnect(self) -> None:
        """Stop delivering size callbacks."""


class SizeObserverFactory(Protocol):
    """Starts continuous height observation of a container."""

    def __call__(self, on_height: HeightCallback) -> SizeObserver:
        """Begin observing and return the handle used to stop."""
