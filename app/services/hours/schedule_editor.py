"""
Template editing helpers.
Fills in defaults so a post always shows all eight keys, and saves edited
rows with one row per (post, day key).
"""

import logging
from datetime import time
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models.schedules import Schedules

from .types import DayKey


logger = logging.getLogger(__name__)

# editor display order
EDITOR_KEYS: tuple[DayKey, ...] = (
    DayKey.MONDAY,
    DayKey.TUESDAY,
    DayKey.WEDNESDAY,
    DayKey.THURSDAY,
    DayKey.FRIDAY,
    DayKey.SATURDAY,
    DayKey.SUNDAY,
    DayKey.HOLIDAY,
)

DEFAULT_START = time(8, 0)
DEFAULT_END = time(16, 0)
CLOSED_BY_DEFAULT = {DayKey.SATURDAY, DayKey.SUNDAY, DayKey.HOLIDAY}


def default_row(key: DayKey) -> dict:
    return {
        "day_of_week": key,
        "start_time": DEFAULT_START,
        "end_time": DEFAULT_END,
        "is_closed": key in CLOSED_BY_DEFAULT,
    }


def merge_with_defaults(rows: Iterable[Schedules]) -> list[dict]:
    """Stored rows over defaults, one entry per key in editor order."""
    stored = {}
    for r in rows:
        stored[DayKey(r.day_of_week)] = {
            "day_of_week": DayKey(r.day_of_week),
            "start_time": r.start_time or DEFAULT_START,
            "end_time": r.end_time or DEFAULT_END,
            "is_closed": r.is_closed,
        }
    return [stored.get(key, default_row(key)) for key in EDITOR_KEYS]


def upsert_schedules(db: Session, post_id: int, rows: Iterable[dict]) -> list[Schedules]:
    """
    Insert or update template rows for a post, keyed on day_of_week.

    When the same key appears more than once the last row wins.
    """
    incoming: dict[DayKey, dict] = {}
    for row in rows:
        incoming[DayKey(row["day_of_week"])] = row

    stmt = select(Schedules).where(Schedules.post_id == post_id)
    existing = {DayKey(s.day_of_week): s for s in db.execute(stmt).scalars().all()}

    for key, row in incoming.items():
        schedule: Optional[Schedules] = existing.get(key)
        if schedule is None:
            schedule = Schedules(post_id=post_id, day_of_week=key.value)
            db.add(schedule)
            existing[key] = schedule
        schedule.start_time = row.get("start_time")
        schedule.end_time = row.get("end_time")
        schedule.is_closed = bool(row.get("is_closed", False))

    db.commit()
    logger.info(f"Saved {len(incoming)} schedule rows for post {post_id}")
    return [existing[k] for k in EDITOR_KEYS if k in existing]
