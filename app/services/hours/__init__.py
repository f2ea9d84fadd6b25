"""
Hours service package.

Usage:
    from datetime import date
    from app.services.hours import compute_device_hours

    # Load data and compute in one call
    result = compute_device_hours(db, device_id=1,
                                  start_date=date(2025, 1, 1), end_date=date(2025, 12, 31))

    # Or compute from plain inputs (no database)
    from app.services.hours import compute, Post, ScheduleTemplate, Holiday

    result = compute(posts, templates, holidays, "2025-01-01", "2025-01-31")
"""

from .types import (
    DayType,
    DayKey,
    Post,
    ScheduleTemplate,
    Holiday,
    HourBuckets,
    FTE,
    PostResult,
    ComputeResult,
)
from .errors import HoursError, InvalidRangeError, InvalidTimeError
from .engine import compute, compute_fte, ANNUAL_FTE_HOURS
from .generator import compute_device_hours
from .export import export_csv, export_filename

__all__ = [
    # Types
    "DayType",
    "DayKey",
    "Post",
    "ScheduleTemplate",
    "Holiday",
    "HourBuckets",
    "FTE",
    "PostResult",
    "ComputeResult",
    # Errors
    "HoursError",
    "InvalidRangeError",
    "InvalidTimeError",
    # Main entry points
    "compute",
    "compute_device_hours",
    # Lower-level functions
    "compute_fte",
    "export_csv",
    "export_filename",
    "ANNUAL_FTE_HOURS",
]
