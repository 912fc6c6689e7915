"""
Tasks feature: Schemas for stored records and client payloads.
"""

from typing import ClassVar

from pydantic import Field

from planner.core.schemas import RecordBase, Text, WriteBase


class TaskRecord(RecordBase):
    """A to-do item on the planning board."""
    table: ClassVar[str] = "tasks"

    title: Text = None
    description: Text = None
    assignee: Text = None
    due_date: Text = Field(default=None, alias="dueDate")
    priority: Text = None  # low | medium | high
    status: Text = None  # todo | in_progress | done


class TaskWrite(WriteBase):
    """Fields a client may set on a task."""
    title: Text = None
    description: Text = None
    assignee: Text = None
    due_date: Text = Field(default=None, alias="dueDate")
    priority: Text = None
    status: Text = None
