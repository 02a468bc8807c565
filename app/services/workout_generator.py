"""Randomised strength workout generation for runners."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from sqlalchemy.orm import Session

from app.models.database_models import Exercise, Workout, WorkoutExercise
from app.models.schemas import Equipment, WorkoutWithExercises
from app.services.exceptions import NoMatchingExercisesError, ValidationError
from app.services.workout_history import build_workout_payload


logger = logging.getLogger(__name__)

MIN_DURATION_MINUTES = 15
MAX_DURATION_MINUTES = 120

MINUTES_PER_EXERCISE = 4
MIN_EXERCISES = 3
MAX_EXERCISES = 8


@dataclass(frozen=True)
class Prescription:
    """Set/rep/rest values applied to every exercise in a workout."""

    sets: int
    reps: str
    rest_seconds: int


SHORT_SESSION = Prescription(sets=2, reps="10-15", rest_seconds=45)
MEDIUM_SESSION = Prescription(sets=3, reps="8-12", rest_seconds=60)
LONG_SESSION = Prescription(sets=4, reps="6-10", rest_seconds=90)


def calculate_exercise_count(duration_minutes: int) -> int:
    """
    Number of exercises to schedule for a session.

    Assumes roughly four minutes per exercise including rest, clamped to
    3-8 so short sessions keep some variety and long ones stay manageable.

    Example:
        >>> calculate_exercise_count(45)
        8
        >>> calculate_exercise_count(16)
        4
    """
    return max(MIN_EXERCISES, min(MAX_EXERCISES, duration_minutes // MINUTES_PER_EXERCISE))


def prescription_for_duration(duration_minutes: int) -> Prescription:
    """Pick the duration tier: <=30 short, 31-59 medium, >=60 long."""
    if duration_minutes <= 30:
        return SHORT_SESSION
    if duration_minutes >= 60:
        return LONG_SESSION
    return MEDIUM_SESSION


def _equipment_values(equipment: Iterable[Equipment | str]) -> list[str]:
    return [item.value if isinstance(item, Equipment) else str(item) for item in equipment]


def filter_by_equipment(
    exercises: Iterable[Exercise],
    available_equipment: Iterable[Equipment | str],
) -> list[Exercise]:
    """
    Keep exercises that can be done with at least one piece of the given equipment.

    This is an overlap test: an exercise listing ``["dumbbells", "bench"]``
    qualifies for a user who only has dumbbells.
    """
    wanted = set(_equipment_values(available_equipment))
    return [ex for ex in exercises if wanted.intersection(ex.equipment_needed or [])]


def select_candidates(
    catalog: Sequence[Exercise],
    available_equipment: Sequence[Equipment | str],
) -> list[Exercise]:
    """
    Equipment-matched exercises, or bodyweight exercises when nothing matches.

    Raises:
        NoMatchingExercisesError: If both the equipment match and the
            bodyweight fallback come up empty.
    """
    candidates = filter_by_equipment(catalog, available_equipment)
    if candidates:
        return candidates

    logger.info(
        "No exercises match equipment %s; falling back to bodyweight exercises",
        _equipment_values(available_equipment),
    )
    candidates = filter_by_equipment(catalog, [Equipment.BODYWEIGHT_ONLY])
    if candidates:
        return candidates

    raise NoMatchingExercisesError(_equipment_values(available_equipment))


def sample_exercises(
    candidates: Sequence[Exercise],
    count: int,
    rng: random.Random | None = None,
) -> list[Exercise]:
    """Uniformly shuffle the candidates and keep the first ``count``."""
    rng = rng or random.Random()
    pool = list(candidates)
    rng.shuffle(pool)
    return pool[:count]


def build_workout_name(duration_minutes: int, exercises: Sequence[Exercise]) -> str:
    """Name a workout after its first two distinct muscle groups, e.g. ``"45min Legs & Core Workout"``."""
    muscle_groups: list[str] = []
    for exercise in exercises:
        if exercise.muscle_group not in muscle_groups:
            muscle_groups.append(exercise.muscle_group)
    return f"{duration_minutes}min {' & '.join(muscle_groups[:2])} Workout"


def validate_generation_request(
    duration_minutes: int,
    available_equipment: Sequence[Equipment | str],
) -> None:
    """Reject non-integer or out-of-range durations and empty or unknown equipment."""
    # bool is an int subclass; True must not pass as a one-minute session.
    if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int):
        raise ValidationError(
            f"duration_minutes must be an integer, got {type(duration_minutes).__name__}"
        )
    if not MIN_DURATION_MINUTES <= duration_minutes <= MAX_DURATION_MINUTES:
        raise ValidationError(
            f"duration_minutes must be between {MIN_DURATION_MINUTES} and {MAX_DURATION_MINUTES}, "
            f"got {duration_minutes}"
        )
    if not available_equipment:
        raise ValidationError("available_equipment must contain at least one item")
    known = {item.value for item in Equipment}
    unknown = [value for value in _equipment_values(available_equipment) if value not in known]
    if unknown:
        raise ValidationError(f"Unknown equipment: {', '.join(unknown)}")


class WorkoutGenerator:
    """Build and persist a strength workout from the exercise catalog."""

    def __init__(self, session: Session, rng: random.Random | None = None) -> None:
        self.session = session
        self.rng = rng or random.Random()

    def generate(
        self,
        user_id: str,
        duration_minutes: int,
        available_equipment: Sequence[Equipment | str],
    ) -> WorkoutWithExercises:
        """
        Generate a workout and store it with its ordered exercise assignments.

        The workout row and every assignment are written in one transaction;
        if anything fails the session is rolled back and nothing is kept.

        Args:
            user_id: Opaque identifier of the workout owner
            duration_minutes: Session length, 15-120 inclusive
            available_equipment: Equipment the user has, in the order supplied

        Returns:
            WorkoutWithExercises: Stored workout with exercises sorted by order_index

        Raises:
            ValidationError: Duration not an integer or out of range, or
                equipment list empty
            NoMatchingExercisesError: No exercise can be done with the equipment
                and the catalog has no bodyweight exercise to fall back to
        """
        validate_generation_request(duration_minutes, available_equipment)
        equipment_used = _equipment_values(available_equipment)

        catalog = self.session.query(Exercise).order_by(Exercise.id).all()
        candidates = select_candidates(catalog, equipment_used)

        target_count = calculate_exercise_count(duration_minutes)
        selected = sample_exercises(candidates, target_count, self.rng)
        prescription = prescription_for_duration(duration_minutes)

        workout = Workout(
            user_id=user_id,
            name=build_workout_name(duration_minutes, selected),
            duration_minutes=duration_minutes,
            equipment_used=equipment_used,
            is_completed=False,
            completed_at=None,
        )
        # Attached while the workout is still pending so the collection never
        # has to be loaded back from the store.
        workout.exercises = [
            WorkoutExercise(
                exercise=exercise,
                sets=prescription.sets,
                reps=prescription.reps,
                rest_seconds=prescription.rest_seconds,
                order_index=index,
            )
            for index, exercise in enumerate(selected)
        ]

        try:
            self.session.add(workout)
            self.session.flush()  # Workout INSERT, then the assignment batch
            payload = build_workout_payload(workout)
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.exception("Failed to store generated workout for user %s", user_id)
            raise

        logger.info(
            "Generated workout: id=%s, user=%s, duration=%d, exercises=%d (candidates=%d)",
            payload.id,
            user_id,
            duration_minutes,
            len(payload.exercises),
            len(candidates),
        )
        return payload
