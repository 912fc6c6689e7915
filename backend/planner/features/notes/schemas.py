"""
Notes feature: Schemas for free-form notes.
"""

from typing import ClassVar

from planner.core.schemas import RecordBase, Text, WriteBase


class NoteRecord(RecordBase):
    table: ClassVar[str] = "notes"

    title: Text = None
    body: Text = None
    tags: Text = None  # comma-separated; a JSON array is joined with ","


class NoteWrite(WriteBase):
    title: Text = None
    body: Text = None
    tags: Text = None
