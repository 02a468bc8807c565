"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from app.config import get_settings
from app.database import SessionLocal, run_migrations
from app.logging_config import configure_logging
from app.routers import exercises, health, workouts
from app.services.exercise_catalog import ExerciseCatalog


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Migrate the schema and seed the starter catalog before serving requests."""
    configure_logging()
    run_migrations()

    if get_settings().seed_on_startup:
        db = SessionLocal()
        try:
            result = ExerciseCatalog(db).seed()
            logger.info("Startup seeding: %s (count=%d)", result["message"], result["count"])
        finally:
            db.close()

    yield


app = FastAPI(title="Runner Strength Workouts API", lifespan=lifespan)


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


# Include routers
app.include_router(health.router)
app.include_router(workouts.router)
app.include_router(exercises.router)
