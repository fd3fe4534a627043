"""Board and table task selection service."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from advisor_crm.core.board import TaskBoard, filter_tasks
from advisor_crm.core.models import Task, TaskStatus
from viewkit.api.events import Subscription
from viewkit.ui_runtime.selection import ClickMode, RangeSelection, SelectionChanged


class TaskSelectionService:
    """Multi-selection over a `TaskBoard`.

    Board mode scopes shift ranges to one status column; table mode treats
    the whole (possibly sorted) row list as a single partition. Ranges and
    select-all only cover rows matching the current search term.
    """

    def __init__(
        self,
        board: TaskBoard,
        *,
        click_mode: ClickMode | str = ClickMode.TOGGLE,
        table_rows: Callable[[], Iterable[Task]] | None = None,
    ) -> None:
        self._board = board
        self._table_rows = table_rows
        self._search_term = ""
        if table_rows is None:
            self._selection: RangeSelection[Task, str, object] = RangeSelection(
                id_of=_task_id,
                partition_of=board.status_of,
                items_in_partition=lambda status: self._matching(board.tasks_by_status(TaskStatus(status))),
                items=board.tasks,
                click_mode=click_mode,
            )
        else:
            self._selection = RangeSelection(
                id_of=_task_id,
                partition_of=lambda _task: None,
                items_in_partition=lambda _partition: self._matching(table_rows()),
                items=board.tasks,
                click_mode=click_mode,
            )

    @property
    def selection(self) -> RangeSelection[Task, str, object]:
        return self._selection

    @property
    def search_term(self) -> str:
        return self._search_term

    def set_search_term(self, term: str) -> None:
        """Limit ranges and select-all to rows matching `term`; selected ids are kept."""
        self._search_term = term

    def visible_rows(self) -> list[Task]:
        """Rows the view shows: board order (or table order) filtered by the search term."""
        rows = self._board.board_order() if self._table_rows is None else self._table_rows()
        return self._matching(rows)

    @property
    def selected_count(self) -> int:
        return self._selection.selected_count

    def handle_click(self, task_id: str, shift: bool = False, ctrl: bool = False) -> bool:
        return self._selection.select_item(task_id, shift, self._board.tasks, ctrl_held=ctrl)

    def handle_checkbox(self, task_id: str, checked: bool, shift: bool = False) -> bool:
        return self._selection.set_checked(task_id, checked, shift, self._board.tasks)

    def toggle_select_all(self) -> bool:
        return self._selection.toggle_select_all(self.visible_rows())

    def clear(self) -> bool:
        return self._selection.clear_selection()

    def is_selected(self, task_id: str) -> bool:
        return self._selection.is_selected(task_id)

    def selected_tasks(self) -> list[Task]:
        return self._selection.selected_items(self._board.tasks)

    def bulk_target_ids(self) -> list[str]:
        """Selected ids still on the board, in board display order."""
        return [task.id for task in self._board.board_order() if self._selection.is_selected(task.id)]

    def refresh(self) -> None:
        """Sync the live collection after the board changed."""
        self._selection.set_items(self._board.tasks)

    def subscribe(self, handler: Callable[[SelectionChanged[str]], None]) -> Subscription:
        return self._selection.subscribe(handler)

    def _matching(self, rows: Iterable[Task]) -> list[Task]:
        return filter_tasks(rows, self._search_term)


def _task_id(task: Task) -> str:
    return task.id
