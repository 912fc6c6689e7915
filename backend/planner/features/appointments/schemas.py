"""
Appointments feature: Schemas for scheduled appointments.
"""

from typing import ClassVar

from pydantic import Field

from planner.core.schemas import RecordBase, Text, WriteBase


class AppointmentRecord(RecordBase):
    table: ClassVar[str] = "appointments"

    title: Text = None
    date: Text = None  # YYYY-MM-DD
    start_time: Text = Field(default=None, alias="startTime")  # HH:MM
    end_time: Text = Field(default=None, alias="endTime")
    location: Text = None
    notes: Text = None


class AppointmentWrite(WriteBase):
    title: Text = None
    date: Text = None
    start_time: Text = Field(default=None, alias="startTime")
    end_time: Text = Field(default=None, alias="endTime")
    location: Text = None
    notes: Text = None
