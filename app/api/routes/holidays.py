from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.db.models.holidays import Holidays
from app.schemas.holidays import HolidayCreate, HolidayResponse

router = APIRouter(prefix="/holidays", tags=["holidays"])


@router.post("", response_model=HolidayResponse, status_code=status.HTTP_201_CREATED)
def create_holiday(
    payload: HolidayCreate,
    db: Session = Depends(get_db),
):
    existing = db.query(Holidays).filter(Holidays.date == payload.date).first()
    if existing:
        raise HTTPException(status_code=400, detail="Holiday already exists for this date")

    holiday = Holidays(**payload.model_dump())
    db.add(holiday)
    db.commit()
    db.refresh(holiday)
    return holiday


@router.get("", response_model=List[HolidayResponse])
def list_holidays(db: Session = Depends(get_db)):
    return db.query(Holidays).order_by(Holidays.date).all()


@router.delete("/{holiday_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_holiday(
    holiday_id: int,
    db: Session = Depends(get_db),
):
    holiday = db.query(Holidays).filter(Holidays.id == holiday_id).first()
    if not holiday:
        raise HTTPException(status_code=404, detail="Holiday not found")

    db.delete(holiday)
    db.commit()
