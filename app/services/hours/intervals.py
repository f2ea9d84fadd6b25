"""
Day/night decomposition of work intervals.
All offsets are minutes within one calendar day (0-1440).
"""

from .types import DayType, HourBuckets


DAWN = 6 * 60        # 06:00
DUSK = 21 * 60       # 21:00
END_OF_DAY = 24 * 60

# (band_start, band_end, is_day)
BANDS: tuple[tuple[int, int, bool], ...] = (
    (0, DAWN, False),
    (DAWN, DUSK, True),
    (DUSK, END_OF_DAY, False),
)


def overlap_hours(start1: int, end1: int, start2: int, end2: int) -> float:
    """Length of the intersection of two minute ranges, in hours. Never negative."""
    return max(0, min(end1, end2) - max(start1, start2)) / 60


def apply_segment(buckets: HourBuckets, day_type: DayType, start: int, end: int) -> None:
    """Split [start, end) over the three bands and add each part to buckets."""
    for band_start, band_end, is_day in BANDS:
        buckets.add(day_type, is_day, overlap_hours(start, end, band_start, band_end))


def apply_shift(
    buckets: HourBuckets,
    day_type: DayType,
    next_day_type: DayType,
    start: int,
    end: int,
) -> None:
    """
    Add one day's shift to buckets.

    When end is not after start the shift crosses midnight: the part up to
    24:00 counts for the current day type, the part from 00:00 to end counts
    for the following day's type. end == start is therefore a 24h shift.
    """
    if end > start:
        apply_segment(buckets, day_type, start, end)
        return

    apply_segment(buckets, day_type, start, END_OF_DAY)
    apply_segment(buckets, next_day_type, 0, end)
