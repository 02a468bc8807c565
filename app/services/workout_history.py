"""Workout completion and per-user history."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session, selectinload

from app.models.database_models import Workout, WorkoutExercise
from app.models.schemas import WorkoutExerciseDetail, WorkoutResponse, WorkoutWithExercises
from app.services.exceptions import NotFoundError


logger = logging.getLogger(__name__)


def build_workout_payload(workout: Workout) -> WorkoutWithExercises:
    """Denormalise a workout and its assignments, sorted by order_index."""

    assignments = sorted(workout.exercises, key=lambda we: we.order_index)
    exercises = [
        WorkoutExerciseDetail(
            id=we.id,
            exercise_id=we.exercise_id,
            name=we.exercise.name,
            muscle_group=we.exercise.muscle_group,
            instructions=we.exercise.instructions,
            runner_benefit=we.exercise.runner_benefit,
            sets=we.sets,
            reps=we.reps,
            rest_seconds=we.rest_seconds,
            order_index=we.order_index,
        )
        for we in assignments
    ]
    return WorkoutWithExercises(
        id=workout.id,
        user_id=workout.user_id,
        name=workout.name,
        duration_minutes=workout.duration_minutes,
        equipment_used=workout.equipment_used,
        is_completed=workout.is_completed,
        completed_at=workout.completed_at,
        created_at=workout.created_at,
        exercises=exercises,
    )


class WorkoutHistoryService:
    """Read and update stored workouts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def complete(self, workout_id: int) -> WorkoutResponse:
        """
        Mark a workout as completed.

        Completing an already completed workout simply refreshes completed_at.

        Raises:
            NotFoundError: If no workout has the given id
        """
        workout = self.session.query(Workout).filter(Workout.id == workout_id).first()
        if not workout:
            raise NotFoundError(f"Workout with id {workout_id} not found")

        workout.is_completed = True
        workout.completed_at = datetime.utcnow()

        self.session.commit()
        self.session.refresh(workout)

        logger.info("Marked workout %s as complete", workout_id)
        return WorkoutResponse.model_validate(workout)

    def list_for_user(self, user_id: str) -> list[WorkoutWithExercises]:
        """Return a user's workouts, newest first, each with ordered exercises."""

        workouts = (
            self.session.query(Workout)
            .filter(Workout.user_id == user_id)
            .options(selectinload(Workout.exercises).joinedload(WorkoutExercise.exercise))
            .order_by(Workout.created_at.desc(), Workout.id.desc())
            .all()
        )

        logger.info("Retrieved %d workouts for user %s", len(workouts), user_id)
        return [build_workout_payload(workout) for workout in workouts]
