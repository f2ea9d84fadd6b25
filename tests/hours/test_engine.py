import pytest
from datetime import date

from app.services.hours.types import Post, ScheduleTemplate, Holiday, HourBuckets
from app.services.hours.errors import InvalidRangeError
from app.services.hours.engine import (
    ANNUAL_FTE_HOURS,
    DAYS_PER_YEAR,
    compute,
    compute_fte,
    period_length,
    round_half_up,
    accumulate_totals,
)

from conftest import get_test_monday, week_templates


class TestPeriodLength:
    def test_single_day(self):
        assert period_length(date(2025, 1, 1), date(2025, 1, 1)) == 1

    def test_one_week(self):
        assert period_length(date(2025, 1, 1), date(2025, 1, 7)) == 7

    def test_leap_year(self):
        assert period_length(date(2024, 1, 1), date(2024, 12, 31)) == 366

    def test_end_before_start_rejected(self):
        with pytest.raises(InvalidRangeError):
            period_length(date(2025, 1, 7), date(2025, 1, 1))


class TestRoundHalfUp:
    def test_exact_tie_rounds_up(self):
        # 0.125 is exact in binary; round() would give 0.12
        assert round_half_up(0.125, 2) == 0.13

    def test_binary_value_below_tie(self):
        # 2.675 is stored as 2.67499999...
        assert round_half_up(2.675, 2) == 2.67

    def test_three_places(self):
        assert round_half_up(1.2679, 3) == 1.268


class TestComputeFTE:
    def test_full_time_year(self):
        fte = compute_fte(ANNUAL_FTE_HOURS, DAYS_PER_YEAR)
        assert fte.period_fte == 1.0
        assert fte.annualized_fte == 1.0

    def test_one_week(self):
        fte = compute_fte(40, 7)
        assert fte.period_fte == 1.268
        assert fte.annualized_fte == 1.268

    def test_zero_hours(self):
        fte = compute_fte(0, 30)
        assert fte.period_fte == 0
        assert fte.annualized_fte == 0

    def test_period_fte_reconstructs_total(self):
        for total, days in [(40, 7), (123.5, 31), (2088, 365), (17.25, 3)]:
            fte = compute_fte(total, days)
            period_full = (days / DAYS_PER_YEAR) * ANNUAL_FTE_HOURS
            assert abs(fte.period_fte - total / period_full) <= 0.0005


class TestAccumulateTotals:
    def test_rounds_after_each_addition(self):
        totals = HourBuckets()
        third = HourBuckets(day_weekday=1 / 3, total=1 / 3)
        accumulate_totals(totals, third)
        accumulate_totals(totals, third)
        # 0.33 + 0.333.. -> 0.66, not round(2/3) = 0.67
        assert totals.day_weekday == 0.66
        assert totals.total == 0.66


class TestCompute:
    def test_office_week(self, reception, office_hours):
        result = compute([reception], office_hours, [], "2025-01-06", "2025-01-12")

        assert result.period_days == 7
        assert len(result.posts) == 1
        hours = result.posts[0].hours
        assert hours.day_weekday == 40
        assert hours.night_weekday == 0
        assert hours.day_sunday == 0
        assert hours.night_sunday == 0
        assert hours.total == 40
        assert result.posts[0].fte.period_fte == 1.268
        assert result.totals.total == 40

    def test_accepts_date_objects(self, reception, office_hours):
        monday = get_test_monday()
        result = compute([reception], office_hours, [], monday, monday)
        assert result.period_days == 1
        assert result.posts[0].hours.day_weekday == 8

    def test_full_year(self, reception, office_hours):
        # 2025 has 261 weekdays
        result = compute([reception], office_hours, [], "2025-01-01", "2025-12-31")
        assert result.period_days == 365
        assert result.posts[0].hours.total == 261 * 8
        assert result.posts[0].fte.annualized_fte == 1.269

    def test_night_shift_on_weekday(self):
        post = Post(id=5, name="Nuit")
        templates = week_templates(5, "22:00", "06:00", days=("monday",))
        result = compute([post], templates, [], "2025-01-06", "2025-01-06")

        hours = result.posts[0].hours
        # 22:00-24:00 Monday plus 00:00-06:00 Tuesday, both weekday nights
        assert hours.night_weekday == 8
        assert hours.day_weekday == 0
        assert hours.total == 8

    def test_night_shift_into_sunday(self):
        post = Post(id=5, name="Nuit")
        templates = week_templates(5, "22:00", "06:00", days=("saturday",))
        result = compute([post], templates, [], "2025-01-11", "2025-01-11")

        hours = result.posts[0].hours
        assert hours.night_weekday == 2
        assert hours.night_sunday == 6

    def test_night_shift_into_holiday(self, night_watch):
        post = Post(id=2, name="Ronde")
        holidays = [Holiday(date=date(2025, 1, 6), label="Test")]
        result = compute([post], night_watch, holidays, "2025-01-05", "2025-01-05")

        hours = result.posts[0].hours
        assert hours.night_sunday == 2
        assert hours.night_holiday == 6
        assert hours.total == 8

    def test_holiday_monday_uses_holiday_template(self, reception, office_hours):
        holidays = [Holiday(date="2025-01-06", label="Férié")]
        result = compute([reception], office_hours, holidays, "2025-01-06", "2025-01-06")
        # Monday template is open, holiday template is closed
        assert result.posts[0].hours.total == 0

        templates = office_hours + [
            ScheduleTemplate(post_id=reception.id, day_key="holiday", start_time="10:00", end_time="14:00"),
        ]
        result = compute([reception], templates, holidays, "2025-01-06", "2025-01-06")
        hours = result.posts[0].hours
        assert hours.day_holiday == 4
        assert hours.day_weekday == 0

    def test_closed_template_contributes_nothing(self, reception):
        templates = [
            ScheduleTemplate(post_id=reception.id, day_key=key, start_time="00:00", end_time="23:00", is_closed=True)
            for key in ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday", "holiday")
        ]
        result = compute([reception], templates, [Holiday(date="2025-01-08")], "2025-01-01", "2025-03-31")
        assert result.posts[0].hours.total == 0

    def test_missing_time_is_no_coverage(self, reception):
        templates = [ScheduleTemplate(post_id=reception.id, day_key="monday", start_time="08:00", end_time=None)]
        result = compute([reception], templates, [], "2025-01-06", "2025-01-12")
        assert result.posts[0].hours.total == 0

    def test_post_without_templates_still_listed(self, two_posts, office_hours):
        result = compute(two_posts, office_hours, [], "2025-01-06", "2025-01-12")
        assert [p.post_id for p in result.posts] == [1, 2]
        assert result.posts[1].hours.total == 0
        assert result.posts[1].fte.period_fte == 0

    def test_templates_of_unlisted_posts_ignored(self, reception, office_hours):
        other = week_templates(99, "00:00", "23:00")
        result = compute([reception], office_hours + other, [], "2025-01-06", "2025-01-12")
        assert result.totals.total == 40

    def test_post_order_preserved(self):
        posts = [Post(id=3, name="Zèbre"), Post(id=1, name="Alpha"), Post(id=2, name="Milieu")]
        result = compute(posts, [], [], "2025-01-01", "2025-01-01")
        assert [p.post_name for p in result.posts] == ["Zèbre", "Alpha", "Milieu"]

    def test_empty_inputs(self):
        result = compute([], [], [], "2025-01-01", "2025-01-31")
        assert result.period_days == 31
        assert result.posts == []
        assert result.totals.as_dict() == HourBuckets().as_dict()

    def test_duplicate_template_last_wins(self, reception):
        templates = [
            ScheduleTemplate(post_id=reception.id, day_key="monday", start_time="08:00", end_time="16:00"),
            ScheduleTemplate(post_id=reception.id, day_key="monday", start_time="08:00", end_time="10:00"),
        ]
        result = compute([reception], templates, [], "2025-01-06", "2025-01-06")
        assert result.posts[0].hours.total == 2

    def test_equal_start_end_is_24h(self, reception):
        templates = [ScheduleTemplate(post_id=reception.id, day_key="monday", start_time="08:00", end_time="08:00")]
        result = compute([reception], templates, [], "2025-01-06", "2025-01-06")
        hours = result.posts[0].hours
        assert hours.total == 24
        assert hours.day_weekday == 15
        assert hours.night_weekday == 9

    def test_totals_round_cumulatively(self):
        posts = [Post(id=1, name="A"), Post(id=2, name="B")]
        templates = [
            ScheduleTemplate(post_id=1, day_key="monday", start_time="08:00", end_time="08:20"),
            ScheduleTemplate(post_id=2, day_key="monday", start_time="08:00", end_time="08:20"),
        ]
        result = compute(posts, templates, [], "2025-01-06", "2025-01-06")
        # per-post values are not rounded
        assert result.posts[0].hours.total == pytest.approx(1 / 3)
        assert result.totals.day_weekday == 0.66
        assert result.totals.total == 0.66

    def test_totals_match_post_sums(self, two_posts, office_hours, night_watch):
        holidays = [Holiday(date="2025-05-01"), Holiday(date="2025-07-14")]
        result = compute(two_posts, office_hours + night_watch, holidays, "2025-01-01", "2025-12-31")
        for name in HourBuckets.FIELDS:
            expected = sum(getattr(p.hours, name) for p in result.posts)
            assert getattr(result.totals, name) == pytest.approx(expected, abs=0.01)

    def test_bucket_total_is_sum_of_categories(self, night_watch):
        post = Post(id=2, name="Ronde")
        holidays = [Holiday(date="2025-01-01")]
        result = compute([post], night_watch, holidays, "2025-01-01", "2025-01-31")
        hours = result.posts[0].hours
        parts = (hours.day_weekday + hours.night_weekday + hours.day_sunday
                 + hours.night_sunday + hours.day_holiday + hours.night_holiday)
        assert hours.total == pytest.approx(parts)
        # 8h every night of January
        assert hours.total == pytest.approx(31 * 8)

    def test_end_before_start_rejected(self, reception, office_hours):
        with pytest.raises(InvalidRangeError):
            compute([reception], office_hours, [], "2025-01-12", "2025-01-06")
