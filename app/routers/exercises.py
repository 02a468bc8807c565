"""Exercise catalog API endpoints."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.schemas import ExerciseCreate, ExerciseResponse, SeedResponse
from app.services.exceptions import ValidationError
from app.services.exercise_catalog import ExerciseCatalog


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/exercises", tags=["exercises"])


@router.get("", response_model=list[ExerciseResponse])
async def get_exercises(db: Annotated[Session, Depends(get_db)]):
    """Return every exercise in the catalog."""
    return ExerciseCatalog(db).list_all()


@router.post("", response_model=ExerciseResponse, status_code=201)
async def create_exercise(
    exercise: ExerciseCreate,
    db: Annotated[Session, Depends(get_db)],
):
    """
    Add an exercise to the catalog.

    Args:
        exercise: name, muscle_group, equipment_needed, instructions, runner_benefit

    Returns:
        ExerciseResponse: Stored exercise with id and created_at
    """
    try:
        return ExerciseCatalog(db).create(exercise)

    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Failed to create exercise %s", exercise.name)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to create exercise: {str(e)}"
        )


@router.post("/seed", response_model=SeedResponse)
async def seed_database(db: Annotated[Session, Depends(get_db)]):
    """Insert the starter catalog if the exercises table is empty."""
    try:
        return ExerciseCatalog(db).seed()

    except Exception as e:
        logger.exception("Failed to seed exercise catalog")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to seed database: {str(e)}"
        )
