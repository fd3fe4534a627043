"""Widget height observation through a Qt event filter."""

from __future__ import annotations

from viewkit.api.viewport import HeightCallback, SizeObserverFactory
from viewkit.runtime.errors import tolerate_teardown
from viewkit.runtime.logging import get_viewkit_logger

try:
    from PyQt6.QtCore import QEvent, QObject
    from PyQt6.QtWidgets import QWidget
except ImportError as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

logger = get_viewkit_logger(__name__)


class _ResizeFilter(QObject):
    def __init__(self, widget: QWidget, on_height: HeightCallback) -> None:
        super().__init__(widget)
        self._widget = widget
        self._on_height = on_height

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # type: ignore[override]
        if watched is self._widget and event.type() == QEvent.Type.Resize:
            self._on_height(float(self._widget.height()))
        return False


class QtSizeObserver:
    """Reports a widget's height after every resize until disconnected."""

    def __init__(self, widget: QWidget, on_height: HeightCallback) -> None:
        self._widget: QWidget | None = widget
        self._filter: _ResizeFilter | None = _ResizeFilter(widget, on_height)
        widget.installEventFilter(self._filter)

    def disconnect(self) -> None:
        widget, event_filter = self._widget, self._filter
        self._widget = None
        self._filter = None
        if widget is None or event_filter is None:
            return
        with tolerate_teardown(logger, "size observer target"):
            widget.removeEventFilter(event_filter)
            event_filter.deleteLater()


def observe_widget_height(widget: QWidget) -> SizeObserverFactory:
    """Build a size-observer factory bound to `widget`."""

    def _start(on_height: HeightCallback) -> QtSizeObserver:
        return QtSizeObserver(widget, on_height)

    return _start
