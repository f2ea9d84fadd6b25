from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_device, get_post
from app.db.models.devices import Devices
from app.db.models.posts import Posts
from app.schemas.posts import PostCreate, PostResponse

router = APIRouter(tags=["posts"])


@router.post("/devices/{device_id}/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: PostCreate,
    device: Devices = Depends(get_device),
    db: Session = Depends(get_db),
):
    post = Posts(device_id=device.id, name=payload.name)
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


@router.get("/devices/{device_id}/posts", response_model=List[PostResponse])
def list_posts(
    device: Devices = Depends(get_device),
    db: Session = Depends(get_db),
):
    return db.query(Posts).filter(Posts.device_id == device.id).order_by(Posts.name).all()


@router.get("/posts/{post_id}", response_model=PostResponse)
def get_post_by_id(post: Posts = Depends(get_post)):
    return post


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post: Posts = Depends(get_post),
    db: Session = Depends(get_db),
):
    db.delete(post)
    db.commit()
