from pydantic import BaseModel
from datetime import time
from typing import Optional
from app.services.hours.types import DayKey


class ScheduleRow(BaseModel):
    day_of_week: DayKey
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    is_closed: bool = False


class ScheduleResponse(ScheduleRow):
    post_id: int

    class Config:
        from_attributes = True
