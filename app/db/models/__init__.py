from app.db.database import Base

# Import models
from app.db.models.devices import Devices
from app.db.models.posts import Posts
from app.db.models.schedules import Schedules
from app.db.models.holidays import Holidays

__all__ = [
    "Base",
    # Models
    "Devices",
    "Posts",
    "Schedules",
    "Holidays",
]
