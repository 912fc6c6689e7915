"""
Appointments feature: Service layer. Search is the only list filter.
"""

from planner.core.resource import ResourceService
from planner.features.appointments.schemas import AppointmentRecord, AppointmentWrite


class AppointmentsService(ResourceService):
    record_model = AppointmentRecord
    write_model = AppointmentWrite
