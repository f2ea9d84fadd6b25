"""Errors raised by the hours computation."""


class HoursError(ValueError):
    pass


class InvalidRangeError(HoursError):
    """End date falls before start date."""

    def __init__(self, start_date, end_date):
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(f"end_date {end_date} is before start_date {start_date}")


class InvalidTimeError(HoursError):
    pass
