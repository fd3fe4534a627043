"""Change-notification contracts shared by list components."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

type ChangeHandler[TEvent] = Callable[[TEvent], None]


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque token returned by `subscribe`; pass it back to `unsubscribe`."""

    id: int


class ChangeSource[TEvent](Protocol):
    """Anything whose observable changes can be followed by a view."""

    def subscribe(self, handler: ChangeHandler[TEvent]) -> Subscription:
        """Call `handler` after every effective change."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Stop notifying; unknown tokens are ignored."""


class ChangeNotifierPort[TEvent](ChangeSource[TEvent], Protocol):
    """Publishing side of a `ChangeSource`."""

    def notify(self, event: TEvent) -> int:
        """Deliver `event` to current handlers and return how many ran."""

    def clear(self) -> None:
        """Drop every subscription."""


def create_change_notifier[TEvent]() -> ChangeNotifierPort[TEvent]:
    """Create the default notifier implementation."""
    from viewkit.runtime.events import ChangeNotifier

    return ChangeNotifier()
