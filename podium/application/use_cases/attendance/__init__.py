"""Attendance use cases."""

from podium.application.use_cases.attendance.attendance_registry import (
    AttendanceRegistry,
)

__all__ = ["AttendanceRegistry"]
