from __future__ import annotations

import pytest

from viewkit.api.events import create_change_notifier
from viewkit.runtime.events import ChangeNotifier


def test_notify_runs_handlers_in_subscription_order() -> None:
    notifier: ChangeNotifier[int] = ChangeNotifier()
    seen: list[str] = []
    notifier.subscribe(lambda value: seen.append(f"a{value}"))
    notifier.subscribe(lambda value: seen.append(f"b{value}"))

    invoked = notifier.notify(1)

    assert invoked == 2
    assert seen == ["a1", "b1"]


def test_unsubscribe_is_idempotent_and_stops_delivery() -> None:
    notifier: ChangeNotifier[int] = ChangeNotifier()
    seen: list[int] = []
    subscription = notifier.subscribe(seen.append)
    notifier.unsubscribe(subscription)
    notifier.unsubscribe(subscription)

    assert notifier.notify(7) == 0
    assert seen == []


def test_handler_unsubscribed_mid_delivery_is_skipped() -> None:
    notifier = create_change_notifier()
    seen: list[str] = []
    tokens = []

    def _first(value: str) -> None:
        seen.append(f"first:{value}")
        notifier.unsubscribe(tokens[1])

    tokens.append(notifier.subscribe(_first))
    tokens.append(notifier.subscribe(lambda value: seen.append(f"second:{value}")))

    assert notifier.notify("x") == 1
    assert seen == ["first:x"]


def test_handler_subscribed_mid_delivery_waits_for_next_event() -> None:
    notifier: ChangeNotifier[str] = ChangeNotifier()
    seen: list[str] = []

    def _late(value: str) -> None:
        seen.append(f"late:{value}")

    def _register(value: str) -> None:
        seen.append(f"register:{value}")
        if len(seen) == 1:
            notifier.subscribe(_late)

    notifier.subscribe(_register)
    notifier.notify("one")
    notifier.notify("two")

    assert seen == ["register:one", "register:two", "late:two"]


def test_clear_drops_all_handlers() -> None:
    notifier: ChangeNotifier[int] = ChangeNotifier()
    notifier.subscribe(lambda value: None)
    notifier.subscribe(lambda value: None)
    assert notifier.handler_count == 2

    notifier.clear()

    assert notifier.handler_count == 0
    assert notifier.notify(1) == 0


def test_subscribe_rejects_non_callable() -> None:
    with pytest.raises(TypeError):
        ChangeNotifier().subscribe("not a handler")  # type: ignore[arg-type]
