"""
Internal data types for the hours computation.
decoupled from SQLAlchemy models for cleaner logic.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class DayType(str, Enum):
    WEEKDAY = "weekday"
    SUNDAY = "sunday"
    HOLIDAY = "holiday"


class DayKey(str, Enum):
    """Template lookup key. SUNDAY doubles as the Sunday override."""
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    HOLIDAY = "holiday"


# indexed by date.weekday() (Monday = 0)
WEEKDAY_KEYS: tuple[DayKey, ...] = (
    DayKey.MONDAY,
    DayKey.TUESDAY,
    DayKey.WEDNESDAY,
    DayKey.THURSDAY,
    DayKey.FRIDAY,
    DayKey.SATURDAY,
    DayKey.SUNDAY,
)


@dataclass
class Post:
    id: int
    name: str
    device_id: Optional[int] = None


@dataclass
class ScheduleTemplate:
    post_id: int
    day_key: DayKey
    start_time: Optional[str] = None  # "HH:MM"
    end_time: Optional[str] = None
    is_closed: bool = False

    def __post_init__(self):
        self.day_key = DayKey(self.day_key)


@dataclass
class Holiday:
    date: date
    label: str = ""

    def __post_init__(self):
        if isinstance(self.date, str):
            self.date = date.fromisoformat(self.date)


@dataclass
class HourBuckets:
    """Hour counters per category. total is kept equal to the sum of the six."""
    day_weekday: float = 0.0
    night_weekday: float = 0.0
    day_sunday: float = 0.0
    night_sunday: float = 0.0
    day_holiday: float = 0.0
    night_holiday: float = 0.0
    total: float = 0.0

    FIELDS = (
        "day_weekday",
        "night_weekday",
        "day_sunday",
        "night_sunday",
        "day_holiday",
        "night_holiday",
        "total",
    )

    def add(self, day_type: DayType, is_day: bool, hours: float) -> None:
        if hours <= 0:
            return
        self.total += hours
        prefix = "day" if is_day else "night"
        name = f"{prefix}_{day_type.value}"
        setattr(self, name, getattr(self, name) + hours)

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in self.FIELDS}


@dataclass(frozen=True)
class FTE:
    period_fte: float
    annualized_fte: float


@dataclass
class PostResult:
    post_id: int
    post_name: str
    hours: HourBuckets
    fte: FTE


@dataclass
class ComputeResult:
    """Output of the hours computation."""
    period_days: int
    posts: list[PostResult] = field(default_factory=list)
    totals: HourBuckets = field(default_factory=HourBuckets)
