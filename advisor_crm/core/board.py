"""Status-partitioned task board with ordering, sorting and search."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from datetime import date
from functools import cmp_to_key
from typing import Literal

from advisor_crm.core.models import STATUS_ORDER, Task, TaskStatus

SortDirection = Literal["asc", "desc"]
SortKey = str | Callable[[Task], object]

# Named sort fields whose raw attribute does not order meaningfully.
_DERIVED_SORT_KEYS: dict[str, Callable[[Task], object]] = {
    "priority": lambda task: task.priority_rank,
    "client": lambda task: task.client_name,
    "status": lambda task: STATUS_ORDER.index(task.status),
}


@dataclass(frozen=True, slots=True)
class SortField:
    key: SortKey
    direction: SortDirection = "asc"


class TaskBoard:
    """Holds the live task collection and its per-status columns.

    Columns are ordered by each task's `order` value, with the original
    collection position breaking ties.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: tuple[Task, ...] = ()
        self._columns: dict[TaskStatus, tuple[Task, ...]] = {}
        self.replace_tasks(tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    def replace_tasks(self, tasks: Iterable[Task]) -> None:
        self._tasks = tuple(tasks)
        self._columns = {
            status: tuple(sorted((t for t in self._tasks if t.status is status), key=lambda t: t.order))
            for status in STATUS_ORDER
        }

    def tasks_by_status(self, status: TaskStatus) -> tuple[Task, ...]:
        return self._columns.get(TaskStatus(status), ())

    def find(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def status_of(self, task: Task) -> TaskStatus:
        return task.status

    def board_order(self) -> list[Task]:
        """All tasks column by column, as the board displays them."""
        ordered: list[Task] = []
        for status in STATUS_ORDER:
            ordered.extend(self._columns[status])
        return ordered


def sort_tasks(tasks: Iterable[Task], sorts: Iterable[SortField]) -> list[Task]:
    """Stable multi-field sort; empty values sort first ascending, last descending."""
    fields = tuple(sorts)
    if not fields:
        return list(tasks)

    def compare(a: Task, b: Task) -> int:
        for field in fields:
            getter = _resolve_sort_key(field.key)
            left, right = getter(a), getter(b)
            if left is None and right is None:
                continue
            if left is None:
                return -1 if field.direction == "asc" else 1
            if right is None:
                return 1 if field.direction == "asc" else -1
            diff = _compare_values(left, right)
            if diff != 0:
                return -diff if field.direction == "desc" else diff
        return 0

    return sorted(tasks, key=cmp_to_key(compare))


def filter_tasks(tasks: Iterable[Task], term: str) -> list[Task]:
    """Case-insensitive match on title or client name; blank term keeps all."""
    needle = term.strip().casefold()
    if not needle:
        return list(tasks)
    return [
        task
        for task in tasks
        if needle in task.title.casefold() or needle in (task.client_name or "").casefold()
    ]


def move_tasks(tasks: Iterable[Task], task_ids: Iterable[str], status: TaskStatus) -> list[Task]:
    """Move `task_ids` to the end of the `status` column in the given order.

    Ids not present in `tasks` are ignored; other tasks keep their place.
    """
    source = tuple(tasks)
    target = TaskStatus(status)
    present = {task.id for task in source}
    moving = [task_id for task_id in dict.fromkeys(task_ids) if task_id in present]
    moving_set = set(moving)
    base = 1 + max(
        (task.order for task in source if task.status is target and task.id not in moving_set),
        default=-1,
    )
    new_order = {task_id: base + offset for offset, task_id in enumerate(moving)}
    return [
        replace(task, status=target, order=new_order[task.id]) if task.id in new_order else task
        for task in source
    ]


def _resolve_sort_key(key: SortKey) -> Callable[[Task], object]:
    if callable(key):
        return key
    derived = _DERIVED_SORT_KEYS.get(key)
    if derived is not None:
        return derived
    return lambda task: getattr(task, key)


def _compare_values(left: object, right: object) -> int:
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return (left > right) - (left < right)
    if isinstance(left, date) and isinstance(right, date):
        return (left > right) - (left < right)
    left_text, right_text = str(left).casefold(), str(right).casefold()
    return (left_text > right_text) - (left_text < right_text)
