"""
Appointments feature: API routes for scheduled appointments.
"""

from planner.core.resource import build_resource_router
from planner.features.appointments.service import AppointmentsService

router = build_resource_router(AppointmentsService)
