"""
Data loader for the hours service.
Fetches posts, templates and holidays from the database and converts to internal types.
"""

from datetime import time
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.models.posts import Posts
from app.db.models.schedules import Schedules
from app.db.models.holidays import Holidays

from .types import Post, ScheduleTemplate, Holiday


def time_to_hhmm(value: Optional[time]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime("%H:%M")


def load_posts(db: Session, device_id: int) -> list[Post]:
    """Load posts of a device, ordered by name."""
    stmt = select(Posts).where(Posts.device_id == device_id).order_by(Posts.name)
    rows = db.execute(stmt).scalars().all()
    return [Post(id=p.id, name=p.name, device_id=p.device_id) for p in rows]


def load_templates(db: Session, post_ids: list[int]) -> list[ScheduleTemplate]:
    """Load template rows for a set of posts."""
    if not post_ids:
        return []

    stmt = select(Schedules).where(Schedules.post_id.in_(post_ids)).order_by(Schedules.id)
    rows = db.execute(stmt).scalars().all()

    return [
        ScheduleTemplate(
            post_id=r.post_id,
            day_key=r.day_of_week,
            start_time=time_to_hhmm(r.start_time),
            end_time=time_to_hhmm(r.end_time),
            is_closed=r.is_closed,
        )
        for r in rows
    ]


def load_holidays(db: Session) -> list[Holiday]:
    stmt = select(Holidays).order_by(Holidays.date)
    rows = db.execute(stmt).scalars().all()
    return [Holiday(date=h.date, label=h.label) for h in rows]


def load_compute_inputs(
    db: Session,
    device_id: int,
) -> tuple[list[Post], list[ScheduleTemplate], list[Holiday]]:
    """
    Load everything the engine needs for one device.

    returns (posts, templates, holidays)
    """
    posts = load_posts(db, device_id)
    templates = load_templates(db, [p.id for p in posts])
    return posts, templates, load_holidays(db)
