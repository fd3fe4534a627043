"""Observable versioned state cell."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from viewkit.api.events import Subscription
from viewkit.runtime.events import ChangeNotifier


@dataclass(frozen=True, slots=True)
class StateChanged[TState]:
    """Published after a state cell takes a new value."""

    value: TState
    previous: TState
    revision: int


class ObservableState[TState]:
    """Versioned value cell with explicit change subscription.

    Setting a value equal to the current one is a no-op: the revision does
    not move and subscribers are not called.
    """

    def __init__(self, initial_state: TState) -> None:
        self._value = initial_state
        self._revision = 0
        self._changes: ChangeNotifier[StateChanged[TState]] = ChangeNotifier()

    def get(self) -> TState:
        """Current value; callers must not mutate it in place."""
        return self._value

    def revision(self) -> int:
        return self._revision

    def set(self, value: TState) -> bool:
        """Replace state value; return whether it changed."""
        if value == self._value:
            return False
        previous = self._value
        self._value = value
        self._revision += 1
        self._changes.notify(StateChanged(value=value, previous=previous, revision=self._revision))
        return True

    def update(self, mutator: Callable[[TState], TState]) -> bool:
        """Set the value returned by `mutator(current)`."""
        return self.set(mutator(self._value))

    def subscribe(self, handler: Callable[[StateChanged[TState]], None]) -> Subscription:
        """Register change handler."""
        return self._changes.subscribe(handler)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._changes.unsubscribe(subscription)
