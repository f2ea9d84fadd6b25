"""
Day classification.
Decides which bucket family a calendar date falls into and which
template key is consulted for it.
"""

from datetime import date
from typing import Collection

from .types import DayType, DayKey, WEEKDAY_KEYS


def classify_day(day: date, holiday_dates: Collection[date]) -> DayType:
    """Holiday beats Sunday, Sunday beats weekday."""
    if day in holiday_dates:
        return DayType.HOLIDAY
    if day.weekday() == 6:
        return DayType.SUNDAY
    return DayType.WEEKDAY


def lookup_key(day: date, day_type: DayType) -> DayKey:
    if day_type == DayType.HOLIDAY:
        return DayKey.HOLIDAY
    if day_type == DayType.SUNDAY:
        return DayKey.SUNDAY
    return WEEKDAY_KEYS[day.weekday()]
