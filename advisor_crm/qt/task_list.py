"""Virtualized task list widget."""

from __future__ import annotations

from collections.abc import Iterable

from advisor_crm.app.task_selection import TaskSelectionService
from advisor_crm.core.board import TaskBoard
from advisor_crm.core.models import PRIORITY_COLORS, STATUS_COLORS, Task
from advisor_crm.qt.frame_scheduler import QtFrameScheduler
from advisor_crm.qt.size_observer import observe_widget_height
from viewkit.runtime.config import ListConfig
from viewkit.ui_runtime.selection import SelectionChanged
from viewkit.ui_runtime.virtual_list import VirtualListController, WindowChanged
from viewkit.ui_runtime.windowing import index_at_offset

try:
    from PyQt6.QtCore import QRectF, Qt
    from PyQt6.QtGui import QColor, QFont, QKeyEvent, QMouseEvent, QPainter
    from PyQt6.QtWidgets import QAbstractScrollArea, QWidget
except ImportError as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc


class _ScrollAreaContainer:
    """Adapts a scroll area to the container geometry port."""

    def __init__(self, area: QAbstractScrollArea) -> None:
        self._area = area

    def scroll_offset(self) -> float:
        return float(self._area.verticalScrollBar().value())

    def viewport_height(self) -> float:
        return float(self._area.viewport().height())


class TaskListView(QAbstractScrollArea):
    """Paints only the rows of the current window; the scrollbar spans every task."""

    def __init__(
        self,
        board: TaskBoard,
        selection: TaskSelectionService,
        config: ListConfig,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._board = board
        self._selection = selection
        self._rows: list[Task] = selection.visible_rows()
        self._frames = QtFrameScheduler(config.frame_interval_ms, parent=self)
        self._controller: VirtualListController[Task] = VirtualListController(
            self._rows,
            item_height=config.item_height,
            container=_ScrollAreaContainer(self),
            frame_scheduler=self._frames,
            observe_size=observe_widget_height(self.viewport()),
            overscan=config.overscan,
            trace=config.window_trace_enabled,
        )
        self._controller.subscribe(self._on_window_changed)
        self._selection.subscribe(self._on_selection_changed)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.verticalScrollBar().setSingleStep(max(1, int(config.item_height)))

    @property
    def controller(self) -> VirtualListController[Task]:
        return self._controller

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def set_tasks(self, tasks: Iterable[Task]) -> None:
        """Replace the board contents and re-window the list."""
        self._board.replace_tasks(tasks)
        self._selection.refresh()
        self._reload_rows()

    def set_search_term(self, term: str) -> None:
        self._selection.set_search_term(term)
        self._reload_rows()

    def showEvent(self, event) -> None:  # type: ignore[override]
        super().showEvent(event)
        self._controller.mount()
        self._sync_scrollbar()

    def hideEvent(self, event) -> None:  # type: ignore[override]
        self._controller.unmount()
        self._frames.shutdown()
        super().hideEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._controller.unmount()
        self._frames.shutdown()
        super().closeEvent(event)

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._sync_scrollbar()

    def scrollContentsBy(self, dx: int, dy: int) -> None:  # type: ignore[override]
        del dx, dy
        self._controller.on_scroll()
        self.viewport().update()

    def paintEvent(self, event) -> None:  # type: ignore[override]
        del event
        window = self._controller.window
        height = self._controller.item_height
        scroll = float(self.verticalScrollBar().value())
        width = float(self.viewport().width())
        painter = QPainter(self.viewport())
        painter.fillRect(self.viewport().rect(), QColor("#1a1a1a"))
        for offset, task in enumerate(window.visible_items):
            top = window.offset_top + offset * height - scroll
            self._draw_row(painter, task, QRectF(0.0, top, width, height))
        painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        content_y = event.position().y() + self.verticalScrollBar().value()
        index = index_at_offset(content_y, self._controller.item_height, len(self._rows))
        if index is None:
            return
        modifiers = event.modifiers()
        self._selection.handle_click(
            self._rows[index].id,
            shift=bool(modifiers & Qt.KeyboardModifier.ShiftModifier),
            ctrl=bool(modifiers & Qt.KeyboardModifier.ControlModifier),
        )

    def keyPressEvent(self, event: QKeyEvent) -> None:  # type: ignore[override]
        if event.key() == Qt.Key.Key_Escape:
            self._selection.clear()
            return
        if event.key() == Qt.Key.Key_A and event.modifiers() & Qt.KeyboardModifier.ControlModifier:
            self._selection.toggle_select_all()
            return
        super().keyPressEvent(event)

    def _on_window_changed(self, event: WindowChanged[Task]) -> None:
        del event
        self.viewport().update()

    def _on_selection_changed(self, event: SelectionChanged[str]) -> None:
        del event
        self.viewport().update()

    def _reload_rows(self) -> None:
        self._rows = self._selection.visible_rows()
        self._controller.set_items(self._rows)
        self._sync_scrollbar()
        self.viewport().update()

    def _sync_scrollbar(self) -> None:
        total = self._controller.window.total_height
        page = self.viewport().height()
        bar = self.verticalScrollBar()
        bar.setPageStep(max(1, page))
        bar.setRange(0, max(0, int(total) - page))

    def _draw_row(self, painter: QPainter, task: Task, rect: QRectF) -> None:
        selected = self._selection.is_selected(task.id)
        painter.fillRect(rect.adjusted(2.0, 1.0, -2.0, -1.0), QColor("#333a4d" if selected else "#252730"))
        painter.fillRect(QRectF(rect.x() + 2.0, rect.y() + 1.0, 4.0, rect.height() - 2.0), QColor(STATUS_COLORS[task.status]))
        if task.priority is not None:
            painter.setBrush(QColor(PRIORITY_COLORS[task.priority]))
            painter.setPen(Qt.PenStyle.NoPen)
            painter.drawEllipse(QRectF(rect.x() + 14.0, rect.center().y() - 4.0, 8.0, 8.0))
        painter.setPen(QColor("#ffffff" if selected else "#e5e7eb"))
        font = QFont()
        font.setPointSizeF(11.0)
        font.setBold(selected)
        painter.setFont(font)
        text_rect = rect.adjusted(30.0, 0.0, -12.0, 0.0)
        painter.drawText(text_rect, Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft, task.title)
        side = " · ".join(part for part in (task.client_name, task.status.label) if part)
        painter.setPen(QColor("#9b9a97"))
        painter.drawText(text_rect, Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignRight, side)
