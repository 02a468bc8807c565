"""Router exposing basic system endpoints."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.database_models import Exercise, Workout


logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/status")
async def get_status() -> dict[str, str]:
    """Return a minimal status payload."""
    return {"status": "online"}


@router.get("/catalog")
async def get_catalog_status(db: Annotated[Session, Depends(get_db)]) -> dict:
    """
    Report whether the exercise catalog is ready for workout generation.

    Returns:
        dict: {
            "exercise_count": int,
            "workout_count": int,
            "is_seeded": bool
        }
    """
    exercise_count = db.query(func.count(Exercise.id)).scalar() or 0
    workout_count = db.query(func.count(Workout.id)).scalar() or 0

    if exercise_count == 0:
        logger.warning("Exercise catalog is empty; generation will fail until it is seeded")

    return {
        "exercise_count": exercise_count,
        "workout_count": workout_count,
        "is_seeded": exercise_count > 0,
    }
