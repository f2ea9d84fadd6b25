"""
Seed script for the PostHours development database.

- One device ("Site Nord") with three posts
- Accueil: 08:00-16:00 Mon-Fri
- Ronde: 22:00-06:00 every night, Sundays and holidays included
- PC Sécurité: 06:00-21:00 Mon-Sat, 08:00-20:00 Sundays, closed on holidays
- French public holidays for 2025

Run with: python -m scripts.seed_data
"""

import sys
from datetime import date, time

from app.db.database import SessionLocal, engine
from app.db.models import Base, Devices, Posts, Schedules, Holidays
from app.services.hours.schedule_editor import EDITOR_KEYS
from app.services.hours.types import DayKey


HOLIDAYS_2025 = [
    (date(2025, 1, 1), "Jour de l'an"),
    (date(2025, 4, 21), "Lundi de Pâques"),
    (date(2025, 5, 1), "Fête du travail"),
    (date(2025, 5, 8), "Victoire 1945"),
    (date(2025, 5, 29), "Ascension"),
    (date(2025, 6, 9), "Lundi de Pentecôte"),
    (date(2025, 7, 14), "Fête nationale"),
    (date(2025, 8, 15), "Assomption"),
    (date(2025, 11, 1), "Toussaint"),
    (date(2025, 11, 11), "Armistice"),
    (date(2025, 12, 25), "Noël"),
]

WEEKDAYS = {DayKey.MONDAY, DayKey.TUESDAY, DayKey.WEDNESDAY, DayKey.THURSDAY, DayKey.FRIDAY}


def reset_tables():
    print("Recreating tables...")
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def seed_holidays(db):
    print("Seeding holidays...")
    for day, label in HOLIDAYS_2025:
        db.add(Holidays(date=day, label=label))
    db.commit()
    print(f"Seeded {len(HOLIDAYS_2025)} holidays.")


def _week(post_id, hours_for):
    """hours_for(key) -> (start, end) or None when closed"""
    rows = []
    for key in EDITOR_KEYS:
        hours = hours_for(key)
        rows.append(Schedules(
            post_id=post_id,
            day_of_week=key.value,
            start_time=hours[0] if hours else time(8, 0),
            end_time=hours[1] if hours else time(16, 0),
            is_closed=hours is None,
        ))
    return rows


def seed_device(db):
    print("Seeding device, posts and schedules...")
    device = Devices(name="Site Nord")
    db.add(device)
    db.flush()

    reception = Posts(device_id=device.id, name="Accueil")
    patrol = Posts(device_id=device.id, name="Ronde")
    control = Posts(device_id=device.id, name="PC Sécurité")
    db.add_all([reception, patrol, control])
    db.flush()

    db.add_all(_week(reception.id, lambda k: (time(8, 0), time(16, 0)) if k in WEEKDAYS else None))
    db.add_all(_week(patrol.id, lambda k: (time(22, 0), time(6, 0))))
    db.add_all(_week(control.id, lambda k: (
        None if k == DayKey.HOLIDAY
        else (time(8, 0), time(20, 0)) if k == DayKey.SUNDAY
        else (time(6, 0), time(21, 0))
    )))
    db.commit()
    print("Seeded 1 device, 3 posts, 24 schedule rows.")


def main():
    """Main seed function."""
    print("\n" + "="*50)
    print("PostHours Database Seeder")
    print("="*50 + "\n")

    response = input("This will DELETE ALL EXISTING DATA. Continue? (yes/no): ")
    if response.lower() != "yes":
        print("Aborted.")
        sys.exit(0)

    reset_tables()
    db = SessionLocal()

    try:
        seed_holidays(db)
        seed_device(db)

        print("\n" + "="*50)
        print("Seeding complete!")
        print("="*50 + "\n")

    except Exception as e:
        db.rollback()
        print(f"\nError during seeding: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
