"""Pydantic models describing API payloads."""
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Equipment(str, Enum):
    """Equipment a user can have on hand; the set is closed."""

    DUMBBELLS = "dumbbells"
    BARBELL = "barbell"
    KETTLEBELLS = "kettlebells"
    RESISTANCE_BANDS = "resistance_bands"
    PULL_UP_BAR = "pull_up_bar"
    BENCH = "bench"
    CABLE_MACHINE = "cable_machine"
    LEG_PRESS = "leg_press"
    SQUAT_RACK = "squat_rack"
    BODYWEIGHT_ONLY = "bodyweight_only"


# Exercise Schemas
class ExerciseBase(BaseModel):
    """Base schema for catalog exercises."""

    name: str = Field(min_length=1)
    muscle_group: str = Field(min_length=1)
    equipment_needed: list[Equipment] = Field(min_length=1)
    instructions: str = Field(min_length=1)
    runner_benefit: str = Field(min_length=1)


class ExerciseCreate(ExerciseBase):
    """Schema for adding an exercise to the catalog."""


class ExerciseResponse(ExerciseBase):
    """Schema for exercise API response."""

    id: int
    created_at: datetime

    class Config:
        from_attributes = True


class SeedResponse(BaseModel):
    """Result of seeding the starter catalog."""

    message: str
    count: int = Field(ge=0)


# Workout Schemas
class GenerateWorkoutRequest(BaseModel):
    """Schema for requesting a new workout."""

    user_id: str
    duration_minutes: int = Field(ge=15, le=120, description="Session length in minutes")
    available_equipment: list[Equipment] = Field(min_length=1)


class WorkoutResponse(BaseModel):
    """Schema for workout API response without its exercises."""

    id: int
    user_id: str
    name: str
    duration_minutes: int
    equipment_used: list[Equipment]
    is_completed: bool
    completed_at: datetime | None = None
    created_at: datetime

    class Config:
        from_attributes = True


class WorkoutExerciseDetail(BaseModel):
    """An exercise assignment joined with the catalog entry it points at."""

    id: int
    exercise_id: int
    name: str
    muscle_group: str
    instructions: str
    runner_benefit: str
    sets: int = Field(gt=0)
    reps: str
    rest_seconds: int = Field(gt=0)
    order_index: int = Field(ge=0)


class WorkoutWithExercises(WorkoutResponse):
    """Schema for workout with its ordered exercise assignments."""

    exercises: list[WorkoutExerciseDetail] = []
