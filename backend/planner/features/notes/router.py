"""
Notes feature: API routes for note management.
"""

from planner.core.resource import build_resource_router
from planner.features.notes.service import NotesService

router = build_resource_router(NotesService)
