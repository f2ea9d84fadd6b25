from typing import Generator
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.database import SessionLocal
from app.db.models.devices import Devices
from app.db.models.posts import Posts


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_device(device_id: int, db: Session = Depends(get_db)) -> Devices:
    """Resolve the device from the path parameter or 404"""
    device = db.query(Devices).filter(Devices.id == device_id).first()
    if not device:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Device not found")
    return device


def get_post(post_id: int, db: Session = Depends(get_db)) -> Posts:
    """Resolve the post from the path parameter or 404"""
    post = db.query(Posts).filter(Posts.id == post_id).first()
    if not post:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post
