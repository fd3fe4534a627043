"""Application services wiring the task board to list runtime components."""

from advisor_crm.app.request_context import RequestContext
from advisor_crm.app.task_selection import TaskSelectionService

__all__ = ["RequestContext", "TaskSelectionService"]
