import pytest
from datetime import date

from app.services.hours.types import Post, ScheduleTemplate, DayKey


WEEKDAY_NAMES = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]


def get_test_monday() -> date:
    # fixed Monday for deterministic tests
    return date(2025, 1, 6)


def week_templates(
    post_id: int,
    start: str,
    end: str,
    days=("monday", "tuesday", "wednesday", "thursday", "friday"),
) -> list[ScheduleTemplate]:
    # open on `days`, closed on every other key
    rows = []
    for key in DayKey:
        open_day = key.value in days
        rows.append(ScheduleTemplate(
            post_id=post_id,
            day_key=key,
            start_time=start,
            end_time=end,
            is_closed=not open_day,
        ))
    return rows


@pytest.fixture
def reception() -> Post:
    return Post(id=1, name="Accueil", device_id=1)


@pytest.fixture
def two_posts() -> list[Post]:
    return [
        Post(id=1, name="Accueil", device_id=1),
        Post(id=2, name="Ronde", device_id=1),
    ]


@pytest.fixture
def office_hours(reception) -> list[ScheduleTemplate]:
    # 08:00-16:00 Monday to Friday, closed weekends and holidays
    return week_templates(reception.id, "08:00", "16:00")


@pytest.fixture
def night_watch() -> list[ScheduleTemplate]:
    # 22:00-06:00 every day, including Sunday and holidays
    return week_templates(2, "22:00", "06:00", days=WEEKDAY_NAMES + ["sunday", "holiday"])
