from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_post
from app.db.models.posts import Posts
from app.db.models.schedules import Schedules
from app.schemas.schedules import ScheduleRow
from app.services.hours.schedule_editor import merge_with_defaults, upsert_schedules

router = APIRouter(prefix="/posts/{post_id}/schedules", tags=["schedules"])


@router.get("", response_model=List[ScheduleRow])
def get_schedules(
    post: Posts = Depends(get_post),
    db: Session = Depends(get_db),
):
    """All eight day keys for the post, defaults filled in where nothing is stored"""
    rows = db.query(Schedules).filter(Schedules.post_id == post.id).all()
    return merge_with_defaults(rows)


@router.put("", response_model=List[ScheduleRow])
def save_schedules(
    payload: List[ScheduleRow],
    post: Posts = Depends(get_post),
    db: Session = Depends(get_db),
):
    upsert_schedules(db, post.id, [row.model_dump() for row in payload])
    rows = db.query(Schedules).filter(Schedules.post_id == post.id).all()
    return merge_with_defaults(rows)
