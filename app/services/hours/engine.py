"""
Hours engine - computes staffed hours per post over a date range.

For every post and every date in the range the day is classified, the
matching template is resolved, and the shift is split into day/night
hours for the right day type. FTE figures are derived per post and the
grand totals are accumulated across posts.
"""

import logging
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

from .classifier import classify_day, lookup_key
from .errors import InvalidRangeError
from .intervals import apply_shift
from .templates import TemplateIndex
from .types import (
    Post,
    ScheduleTemplate,
    Holiday,
    HourBuckets,
    FTE,
    PostResult,
    ComputeResult,
)


logger = logging.getLogger(__name__)

ANNUAL_FTE_HOURS = 1645
DAYS_PER_YEAR = 365

DateLike = Union[date, str]


def round_half_up(value: float, places: int) -> float:
    """Round the exact binary value of a float, ties away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _to_date(value: DateLike) -> date:
    if isinstance(value, str):
        return date.fromisoformat(value)
    return value


def period_length(start_date: date, end_date: date) -> int:
    """Number of days in the closed range [start_date, end_date]."""
    if end_date < start_date:
        raise InvalidRangeError(start_date, end_date)
    return (end_date - start_date).days + 1


def compute_fte(total_hours: float, period_days: int) -> FTE:
    """
    Derive FTE figures from a post's total hours.

    period_fte: share of a full-time post covered during this exact period.
    annualized_fte: the same rate extrapolated to a full year.
    """
    period_full = (period_days / DAYS_PER_YEAR) * ANNUAL_FTE_HOURS
    return FTE(
        period_fte=round_half_up(total_hours / period_full, 3),
        annualized_fte=round_half_up((total_hours / period_days) * DAYS_PER_YEAR / ANNUAL_FTE_HOURS, 3),
    )


def accumulate_totals(totals: HourBuckets, hours: HourBuckets) -> None:
    """Add one post's buckets into totals, rounding each field to 2 decimals."""
    for name in HourBuckets.FIELDS:
        setattr(totals, name, round_half_up(getattr(totals, name) + getattr(hours, name), 2))


def compute_post_hours(
    post_id: int,
    index: TemplateIndex,
    holiday_dates: set[date],
    start_date: date,
    end_date: date,
) -> HourBuckets:
    """Accumulate hours for a single post over [start_date, end_date]."""
    buckets = HourBuckets()
    current = start_date
    while current <= end_date:
        day_type = classify_day(current, holiday_dates)
        interval = index.resolve(post_id, lookup_key(current, day_type))

        if interval is not None:
            start, end = interval
            next_day_type = classify_day(current + timedelta(days=1), holiday_dates)
            apply_shift(buckets, day_type, next_day_type, start, end)

        current += timedelta(days=1)
    return buckets


def compute(
    posts: Iterable[Post],
    templates: Iterable[ScheduleTemplate],
    holidays: Iterable[Holiday],
    start_date: DateLike,
    end_date: DateLike,
) -> ComputeResult:
    """
    Compute hours per post for a period.

    Args:
        posts: Posts in output order (usually sorted by name)
        templates: Template rows; rows for posts not listed are ignored
        holidays: Holiday calendar
        start_date: First day of the period (inclusive)
        end_date: Last day of the period (inclusive)

    Returns:
        ComputeResult with per-post buckets and FTE, plus grand totals

    Raises:
        InvalidRangeError: If end_date is before start_date
    """
    start = _to_date(start_date)
    end = _to_date(end_date)
    period_days = period_length(start, end)

    index = TemplateIndex.build(templates)
    holiday_dates = {h.date for h in holidays}

    result = ComputeResult(period_days=period_days)
    for post in posts:
        hours = compute_post_hours(post.id, index, holiday_dates, start, end)
        fte = compute_fte(hours.total, period_days)
        accumulate_totals(result.totals, hours)
        result.posts.append(PostResult(post_id=post.id, post_name=post.name, hours=hours, fte=fte))

    logger.debug(
        f"Computed {len(result.posts)} posts over {period_days} days "
        f"({start} to {end}), total {result.totals.total:.2f}h"
    )
    return result
