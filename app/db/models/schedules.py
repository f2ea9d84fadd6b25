from sqlalchemy import Integer, String, Time, Boolean, ForeignKey, UniqueConstraint
from datetime import time
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import Optional
from app.db.database import Base


class Schedules(Base):
    __tablename__ = "schedules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    post_id: Mapped[int] = mapped_column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False)
    day_of_week: Mapped[str] = mapped_column(String(10), nullable=False)  # monday..sunday, holiday
    start_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    end_time: Mapped[Optional[time]] = mapped_column(Time, nullable=True)
    is_closed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    post: Mapped["Posts"] = relationship(back_populates="schedules")

    __table_args__ = (
        UniqueConstraint("post_id", "day_of_week", name="uq_schedules_post_day"),
    )
