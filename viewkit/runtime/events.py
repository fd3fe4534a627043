"""Handler registry behind component change notifications."""

from __future__ import annotations

from viewkit.api.events import ChangeHandler, Subscription


class ChangeNotifier[TEvent]:
    """Ordered handler list for one component's change events.

    Handlers run in subscription order over a snapshot, so a handler may
    subscribe or unsubscribe while an event is being delivered.
    """

    def __init__(self) -> None:
        self._next_id = 1
        self._handlers: dict[int, ChangeHandler[TEvent]] = {}

    @property
    def handler_count(self) -> int:
        return len(self._handlers)

    def subscribe(self, handler: ChangeHandler[TEvent]) -> Subscription:
        if not callable(handler):
            raise TypeError("handler must be callable")
        token = Subscription(self._next_id)
        self._next_id += 1
        self._handlers[token.id] = handler
        return token

    def unsubscribe(self, subscription: Subscription) -> None:
        self._handlers.pop(subscription.id, None)

    def clear(self) -> None:
        self._handlers.clear()

    def notify(self, event: TEvent) -> int:
        invoked = 0
        for handler_id, handler in tuple(self._handlers.items()):
            if handler_id not in self._handlers:
                continue
            handler(event)
            invoked += 1
        return invoked
