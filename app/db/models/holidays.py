import datetime
from sqlalchemy import Integer, String, Date
from sqlalchemy.orm import Mapped, mapped_column
from app.db.database import Base


class Holidays(Base):
    __tablename__ = "holidays"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    date: Mapped[datetime.date] = mapped_column(Date, unique=True, index=True, nullable=False)
    label: Mapped[str] = mapped_column(String(100), nullable=False, default="")
