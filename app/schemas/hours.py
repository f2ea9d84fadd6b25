from pydantic import BaseModel
from datetime import date
from typing import List


class HourBucketsResponse(BaseModel):
    day_weekday: float
    night_weekday: float
    day_sunday: float
    night_sunday: float
    day_holiday: float
    night_holiday: float
    total: float

    class Config:
        from_attributes = True


class FTEResponse(BaseModel):
    period_fte: float
    annualized_fte: float

    class Config:
        from_attributes = True


class PostHoursResponse(BaseModel):
    post_id: int
    post_name: str
    hours: HourBucketsResponse
    fte: FTEResponse

    class Config:
        from_attributes = True


class HoursResponse(BaseModel):
    device_id: int
    start_date: date
    end_date: date
    period_days: int
    posts: List[PostHoursResponse]
    totals: HourBucketsResponse
