"""API endpoints for workout generation, completion and history."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.schemas import GenerateWorkoutRequest, WorkoutResponse, WorkoutWithExercises
from app.services.exceptions import NoMatchingExercisesError, NotFoundError, ValidationError
from app.services.workout_generator import WorkoutGenerator
from app.services.workout_history import WorkoutHistoryService


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


@router.post("/generate", response_model=WorkoutWithExercises, status_code=201)
async def generate_workout(
    workout_request: GenerateWorkoutRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """
    Generate a randomised strength workout for the requested duration and equipment.

    Args:
        workout_request: user_id, duration_minutes (15-120) and available_equipment

    Returns:
        WorkoutWithExercises: Stored workout with exercises in execution order
    """
    try:
        generator = WorkoutGenerator(db)
        return generator.generate(
            user_id=workout_request.user_id,
            duration_minutes=workout_request.duration_minutes,
            available_equipment=workout_request.available_equipment,
        )

    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NoMatchingExercisesError as e:
        logger.warning("No exercises for equipment %s", e.available_equipment)
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception("Failed to generate workout for user %s", workout_request.user_id)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to generate workout: {str(e)}"
        )


@router.get("/users/{user_id}", response_model=list[WorkoutWithExercises])
async def get_user_workouts(
    user_id: str,
    db: Annotated[Session, Depends(get_db)],
):
    """
    List a user's workouts, most recent first.

    Args:
        user_id: Owner of the workouts

    Returns:
        list[WorkoutWithExercises]: Workouts with their exercises, empty if none
    """
    try:
        return WorkoutHistoryService(db).list_for_user(user_id)

    except Exception as e:
        logger.exception("Failed to retrieve workouts for user %s", user_id)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to retrieve workouts: {str(e)}"
        )


@router.put("/{workout_id}/complete", response_model=WorkoutResponse)
async def complete_workout(
    workout_id: Annotated[int, Path(gt=0)],
    db: Annotated[Session, Depends(get_db)],
):
    """
    Mark a workout as complete.

    Args:
        workout_id: Workout ID

    Returns:
        WorkoutResponse: Updated workout record
    """
    try:
        return WorkoutHistoryService(db).complete(workout_id)

    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception("Failed to complete workout %s", workout_id)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to update workout: {str(e)}"
        )
