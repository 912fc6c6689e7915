"""
Tasks feature: Service layer for task management.
"""

from typing import Any

from planner.core.resource import ResourceService
from planner.features.tasks.schemas import TaskRecord, TaskWrite

DEFAULT_PRIORITY = "low"
DEFAULT_STATUS = "todo"


class TasksService(ResourceService):
    """Tasks, filterable by status. New tasks start as low priority, todo."""

    record_model = TaskRecord
    write_model = TaskWrite
    filters = ("status",)

    def apply_create_defaults(self, columns: dict[str, Any]) -> dict[str, Any]:
        if columns.get("priority") is None:
            columns["priority"] = DEFAULT_PRIORITY
        if columns.get("status") is None:
            columns["status"] = DEFAULT_STATUS
        return columns
