"""
Notes feature: Service layer for notes.
"""

from planner.core.resource import ResourceService
from planner.features.notes.schemas import NoteRecord, NoteWrite


class NotesService(ResourceService):
    record_model = NoteRecord
    write_model = NoteWrite
