import datetime
from pydantic import BaseModel


class HolidayBase(BaseModel):
    date: datetime.date
    label: str = ""


class HolidayCreate(HolidayBase):
    pass


class HolidayResponse(HolidayBase):
    id: int

    class Config:
        from_attributes = True
