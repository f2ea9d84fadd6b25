import logging
from dataclasses import asdict
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_device
from app.core.config import settings
from app.db.models.devices import Devices
from app.schemas.hours import HoursResponse
from app.services.hours import (
    ComputeResult,
    InvalidRangeError,
    compute_device_hours,
    export_csv,
    export_filename,
)

router = APIRouter(prefix="/devices/{device_id}/hours", tags=["hours"])

logger = logging.getLogger(__name__)


def _period(start_date: Optional[date], end_date: Optional[date]) -> tuple[date, date]:
    start = start_date or date.fromisoformat(settings.DEFAULT_START_DATE)
    end = end_date or date.fromisoformat(settings.DEFAULT_END_DATE)
    return start, end


def _compute(db: Session, device: Devices, start: date, end: date) -> ComputeResult:
    try:
        return compute_device_hours(db, device.id, start, end)
    except InvalidRangeError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("", response_model=HoursResponse)
def get_hours(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    device: Devices = Depends(get_device),
    db: Session = Depends(get_db),
):
    start, end = _period(start_date, end_date)
    result = _compute(db, device, start, end)
    logger.info(f"Device {device.id}: {len(result.posts)} posts, {result.period_days} days")

    return HoursResponse(
        device_id=device.id,
        start_date=start,
        end_date=end,
        **asdict(result),
    )


@router.get("/export")
def export_hours(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    device: Devices = Depends(get_device),
    db: Session = Depends(get_db),
):
    start, end = _period(start_date, end_date)
    result = _compute(db, device, start, end)

    return Response(
        content=export_csv(result, start, end),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(start, end)}"'},
    )
