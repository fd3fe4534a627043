from __future__ import annotations

import pytest

from viewkit.runtime.frames import ManualFrameScheduler


class FakeScrollContainer:
    def __init__(self, *, offset: float = 0.0, height: float = 0.0) -> None:
        self.offset = offset
        self.height = height

    def scroll_offset(self) -> float:
        return self.offset

    def viewport_height(self) -> float:
        return self.height


class FakeSizeObserver:
    def __init__(self, owner: "FakeSizeObserverFactory") -> None:
        self._owner = owner
        self.connected = True

    def disconnect(self) -> None:
        self.connected = False
        self._owner.disconnects += 1


class FakeSizeObserverFactory:
    def __init__(self) -> None:
        self.callback = None
        self.observers: list[FakeSizeObserver] = []
        self.disconnects = 0

    def __call__(self, on_height) -> FakeSizeObserver:
        self.callback = on_height
        observer = FakeSizeObserver(self)
        self.observers.append(observer)
        return observer

    def emit(self, height: float) -> None:
        assert self.callback is not None
        self.callback(height)


@pytest.fixture
def container() -> FakeScrollContainer:
    return FakeScrollContainer(height=100.0)


@pytest.fixture
def size_observers() -> FakeSizeObserverFactory:
    return FakeSizeObserverFactory()


@pytest.fixture
def frames() -> ManualFrameScheduler:
    return ManualFrameScheduler()
