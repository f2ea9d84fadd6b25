from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.api.routes import devices, posts, schedules, holidays, hours
from app.core.logging import setup_logging
from app.db.database import engine
from app.db.models import Base

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title="PostHours API", version="0.1.0", lifespan=lifespan)

app.include_router(devices.router, prefix="/api/v1")
app.include_router(posts.router, prefix="/api/v1")
app.include_router(schedules.router, prefix="/api/v1")
app.include_router(holidays.router, prefix="/api/v1")
app.include_router(hours.router, prefix="/api/v1")


@app.get("/health")
def health_check():
    return {"status": "ok"}
