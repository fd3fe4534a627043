"""Public viewkit API contracts."""

from viewkit.api.events import ChangeHandler, ChangeNotifierPort, ChangeSource, Subscription, create_change_notifier
from viewkit.api.frames import FrameCallback, FrameHandle, FrameScheduler
from viewkit.api.logging import LoggingConfig
from viewkit.api.viewport import HeightCallback, ScrollContainer, SizeObserver, SizeObserverFactory

__all__ = [
    "ChangeHandler",
    "ChangeNotifierPort",
    "ChangeSource",
    "FrameCallback",
    "FrameHandle",
    "FrameScheduler",
    "HeightCallback",
    "LoggingConfig",
    "ScrollContainer",
    "SizeObserver",
    "SizeObserverFactory",
    "Subscription",
    "create_change_notifier",
]
