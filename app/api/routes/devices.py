from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_device
from app.db.models.devices import Devices
from app.schemas.devices import DeviceCreate, DeviceResponse

router = APIRouter(prefix="/devices", tags=["devices"])


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
def create_device(
    payload: DeviceCreate,
    db: Session = Depends(get_db),
):
    existing = db.query(Devices).filter(Devices.name == payload.name).first()
    if existing:
        raise HTTPException(status_code=400, detail="Device name already exists")

    device = Devices(**payload.model_dump())
    db.add(device)
    db.commit()
    db.refresh(device)
    return device


@router.get("", response_model=List[DeviceResponse])
def list_devices(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    return db.query(Devices).order_by(Devices.name).offset(skip).limit(limit).all()


@router.get("/{device_id}", response_model=DeviceResponse)
def get_device_by_id(device: Devices = Depends(get_device)):
    return device


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_device(
    device: Devices = Depends(get_device),
    db: Session = Depends(get_db),
):
    # posts and their schedules go with it
    db.delete(device)
    db.commit()
