"""
Schedule template lookup.
Indexes template rows by (post, day key) and resolves the work interval
for a post on a given key.
"""

from typing import Iterable, Optional

from .errors import InvalidTimeError
from .types import DayKey, ScheduleTemplate


def parse_hhmm(value: str) -> int:
    """
    Convert "HH:MM" (or "HH:MM:SS", seconds ignored) to minutes since midnight.

    "24:00" is accepted as end of day (1440).
    """
    parts = value.strip().split(":")
    if len(parts) not in (2, 3):
        raise InvalidTimeError(f"Invalid time {value!r}, expected HH:MM")
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidTimeError(f"Invalid time {value!r}, expected HH:MM") from None

    if not (0 <= hours <= 24 and 0 <= minutes < 60) or (hours == 24 and minutes != 0):
        raise InvalidTimeError(f"Time out of range: {value!r}")
    return hours * 60 + minutes


class TemplateIndex:
    """
    Templates keyed by (post_id, day_key).

    At most one row is kept per key: when the input holds duplicates the
    last row in iteration order wins, same as an upsert on that key.
    """

    def __init__(self):
        self._rows: dict[tuple[int, DayKey], ScheduleTemplate] = {}

    @classmethod
    def build(cls, templates: Iterable[ScheduleTemplate]) -> "TemplateIndex":
        index = cls()
        for template in templates:
            index.put(template)
        return index

    def put(self, template: ScheduleTemplate) -> None:
        self._rows[(template.post_id, DayKey(template.day_key))] = template

    def get(self, post_id: int, key: DayKey) -> Optional[ScheduleTemplate]:
        return self._rows.get((post_id, key))

    def resolve(self, post_id: int, key: DayKey) -> Optional[tuple[int, int]]:
        """
        Get the nominal work interval (start, end) in minutes.

        Returns:
            None when there is no row, the row is closed, or either time is
            missing (no coverage that day).
        """
        row = self.get(post_id, key)
        if row is None or row.is_closed:
            return None
        if not row.start_time or not row.end_time:
            return None
        return parse_hhmm(row.start_time), parse_hhmm(row.end_time)

    def __len__(self) -> int:
        return len(self._rows)
