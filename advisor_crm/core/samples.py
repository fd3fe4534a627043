"""Deterministic sample tasks for demos and large-list checks."""

from __future__ import annotations

import random
from datetime import date, timedelta

from advisor_crm.core.models import STATUS_ORDER, Task, TaskPriority

_CLIENTS: tuple[str, ...] = (
    "Ana Ribeiro",
    "Bruno Castro",
    "Carla Mendes",
    "Diego Farias",
    "Elisa Moura",
    "Fábio Nunes",
)

_ACTIONS: tuple[str, ...] = (
    "Review portfolio",
    "Send rebalancing proposal",
    "Schedule quarterly meeting",
    "Collect tax documents",
    "Update risk profile",
    "Follow up on transfer",
)


def generate_sample_tasks(count: int, *, seed: int = 7, start: date | None = None) -> list[Task]:
    """Build `count` tasks spread over every status with per-column order values."""
    rng = random.Random(seed)
    base = start or date(2026, 1, 5)
    priorities: tuple[TaskPriority | None, ...] = (*TaskPriority, None)
    next_order = {status: 0 for status in STATUS_ORDER}
    tasks: list[Task] = []
    for index in range(max(0, count)):
        status = STATUS_ORDER[rng.randrange(len(STATUS_ORDER))]
        client = _CLIENTS[rng.randrange(len(_CLIENTS))]
        tasks.append(
            Task(
                id=f"task-{index + 1}",
                title=f"{_ACTIONS[rng.randrange(len(_ACTIONS))]} #{index + 1}",
                status=status,
                order=next_order[status],
                priority=priorities[rng.randrange(len(priorities))],
                client_name=client,
                assignees=(client.split()[0].lower(),),
                due_date=base + timedelta(days=rng.randrange(90)),
            )
        )
        next_order[status] += 1
    return tasks
