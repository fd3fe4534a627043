from __future__ import annotations

from viewkit.runtime.state import ObservableState, StateChanged


def test_observable_state_set_notifies_on_change() -> None:
    state = ObservableState(1)
    seen: list[StateChanged[int]] = []
    state.subscribe(seen.append)

    assert state.set(2)
    assert not state.set(2)

    assert state.get() == 2
    assert state.revision() == 1
    assert seen == [StateChanged(value=2, previous=1, revision=1)]


def test_observable_state_update_applies_mutator() -> None:
    state = ObservableState((1, 2))

    assert state.update(lambda value: (*value, 3))
    assert state.get() == (1, 2, 3)
    assert not state.update(lambda value: value)


def test_observable_state_unsubscribe() -> None:
    state = ObservableState("a")
    seen: list[str] = []
    subscription = state.subscribe(lambda event: seen.append(event.value))
    state.unsubscribe(subscription)

    state.set("b")

    assert seen == []
