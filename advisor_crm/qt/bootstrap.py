"""Qt frontend bootstrap and runtime wiring."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import partial

from advisor_crm.app.task_selection import TaskSelectionService
from advisor_crm.core.board import SortField, TaskBoard, move_tasks, sort_tasks
from advisor_crm.core.models import STATUS_ORDER, Task, TaskStatus
from advisor_crm.qt.task_list import TaskListView
from viewkit.runtime.config import ListConfig
from viewkit.runtime.logging import get_viewkit_logger
from viewkit.runtime.state import ObservableState, StateChanged

try:
    from PyQt6.QtWidgets import (
        QApplication,
        QComboBox,
        QHBoxLayout,
        QLabel,
        QLineEdit,
        QMainWindow,
        QPushButton,
        QVBoxLayout,
        QWidget,
    )
except ImportError as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

logger = get_viewkit_logger(__name__)

DEFAULT_TABLE_SORTS: tuple[SortField, ...] = (
    SortField("due_date", "desc"),
    SortField("priority", "asc"),
)


@dataclass(frozen=True, slots=True)
class QtFrontend:
    window: QMainWindow
    list_view: TaskListView
    run_event_loop: Callable[[], int]


def _table_rows(board: TaskBoard) -> list[Task]:
    return sort_tasks(board.tasks, DEFAULT_TABLE_SORTS)


def create_qt_frontend(tasks: Iterable[Task], config: ListConfig, *, table_mode: bool = False) -> QtFrontend:
    """Build the task list window and its event-loop runner."""
    app = QApplication.instance() or QApplication([])
    app.setStyleSheet(
        """
        QWidget { font-size: 14px; background: #1a1a1a; color: #e5e7eb; }
        QLabel { color: #9b9a97; padding: 6px 10px; }
        QLineEdit, QComboBox, QPushButton { padding: 4px 8px; border: 1px solid #333a4d; }
        """
    )
    board = TaskBoard(tasks)
    selection = TaskSelectionService(
        board,
        click_mode=config.click_mode,
        table_rows=partial(_table_rows, board) if table_mode else None,
    )
    list_view = TaskListView(board, selection, config)
    search = ObservableState("")

    search_box = QLineEdit()
    search_box.setPlaceholderText("Search title or client")
    search_box.textChanged.connect(search.set)
    status_picker = QComboBox()
    for column in STATUS_ORDER:
        status_picker.addItem(column.label, column.value)
    move_button = QPushButton("Move selected")
    status = QLabel()

    def _sync_status(_event: object = None) -> None:
        status.setText(
            f"{list_view.row_count} of {len(board.tasks)} tasks  |  {selection.selected_count} selected"
        )
        move_button.setEnabled(selection.selected_count > 0)

    def _apply_search(event: StateChanged[str]) -> None:
        list_view.set_search_term(event.value)
        _sync_status()

    def _move_selected() -> None:
        target_ids = selection.bulk_target_ids()
        if not target_ids:
            return
        target = TaskStatus(status_picker.currentData())
        list_view.set_tasks(move_tasks(board.tasks, target_ids, target))
        logger.info("bulk_move count=%d status=%s", len(target_ids), target.value)
        _sync_status()

    search.subscribe(_apply_search)
    selection.subscribe(_sync_status)
    move_button.clicked.connect(_move_selected)
    _sync_status()

    toolbar = QHBoxLayout()
    toolbar.addWidget(search_box, 1)
    toolbar.addWidget(status_picker)
    toolbar.addWidget(move_button)

    central = QWidget()
    layout = QVBoxLayout(central)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.addLayout(toolbar)
    layout.addWidget(status)
    layout.addWidget(list_view)
    window = QMainWindow()
    window.setCentralWidget(central)
    window.setWindowTitle("Advisor CRM - Tasks")
    window.resize(900, 640)
    return QtFrontend(window=window, list_view=list_view, run_event_loop=app.exec)
