"""
Tasks feature: API routes for task management.
"""

from planner.core.resource import build_resource_router
from planner.features.tasks.service import TasksService

router = build_resource_router(TasksService)
