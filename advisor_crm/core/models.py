"""Core task models and display tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum


class TaskStatus(StrEnum):
    """Board column a task lives in."""

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


class TaskPriority(StrEnum):
    URGENT = "Urgente"
    IMPORTANT = "Importante"
    NORMAL = "Normal"
    LOW = "Baixa"


STATUS_ORDER: tuple[TaskStatus, ...] = (
    TaskStatus.TODO,
    TaskStatus.IN_PROGRESS,
    TaskStatus.DONE,
)

STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "A Fazer",
    TaskStatus.IN_PROGRESS: "Em Progresso",
    TaskStatus.DONE: "Concluído",
}

# Lower value sorts first.
PRIORITY_ORDER: dict[TaskPriority, int] = {
    TaskPriority.URGENT: 0,
    TaskPriority.IMPORTANT: 1,
    TaskPriority.NORMAL: 2,
    TaskPriority.LOW: 3,
}

STATUS_COLORS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "#64635e",
    TaskStatus.IN_PROGRESS: "#344151",
    TaskStatus.DONE: "#166534",
}

PRIORITY_COLORS: dict[TaskPriority, str] = {
    TaskPriority.URGENT: "#ef4444",
    TaskPriority.IMPORTANT: "#f59e0b",
    TaskPriority.NORMAL: "#60a5fa",
    TaskPriority.LOW: "#6b7280",
}


@dataclass(frozen=True, slots=True)
class Task:
    """One advisor task as shown on the board and in the table."""

    id: str
    title: str
    status: TaskStatus
    order: int = 0
    priority: TaskPriority | None = None
    client_name: str | None = None
    assignees: tuple[str, ...] = field(default_factory=tuple)
    due_date: date | None = None

    @property
    def priority_rank(self) -> int | None:
        if self.priority is None:
            return None
        return PRIORITY_ORDER[self.priority]
