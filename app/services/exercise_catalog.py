"""Exercise catalog access and starter seeding."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.models.database_models import Exercise
from app.models.exercise_library import STARTER_EXERCISES
from app.models.schemas import Equipment, ExerciseCreate
from app.services.exceptions import ValidationError


logger = logging.getLogger(__name__)


class ExerciseCatalog:
    """Thin persistence wrapper around the exercises table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_all(self) -> list[Exercise]:
        """Every exercise in the catalog, oldest first."""

        return self.session.query(Exercise).order_by(Exercise.id).all()

    def create(self, payload: ExerciseCreate) -> Exercise:
        """Insert a new exercise and return it with its id and created_at set."""

        fields = {
            "name": payload.name,
            "muscle_group": payload.muscle_group,
            "instructions": payload.instructions,
            "runner_benefit": payload.runner_benefit,
        }
        blank = [key for key, value in fields.items() if not value.strip()]
        if blank:
            raise ValidationError(f"Fields must not be blank: {', '.join(blank)}")
        if not payload.equipment_needed:
            raise ValidationError("equipment_needed must contain at least one item")

        exercise = Exercise(
            **fields,
            equipment_needed=[Equipment(item).value for item in payload.equipment_needed],
        )
        self.session.add(exercise)
        self.session.commit()
        self.session.refresh(exercise)

        logger.info("Created exercise: id=%s, name=%s", exercise.id, exercise.name)
        return exercise

    def seed(self) -> dict:
        """
        Load the starter catalog into an empty exercises table.

        Returns:
            dict: {"message": str, "count": number of exercises inserted}
        """
        if self.session.query(Exercise.id).first() is not None:
            logger.info("Exercise catalog already seeded, skipping")
            return {"message": "Database already seeded", "count": 0}

        exercises = [Exercise(**entry) for entry in STARTER_EXERCISES]
        try:
            self.session.add_all(exercises)
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.exception("Failed to seed exercise catalog")
            raise

        logger.info("Seeded %d exercises", len(exercises))
        for index, exercise in enumerate(exercises, start=1):
            logger.debug("  %d. %s (id=%s)", index, exercise.name, exercise.id)
        return {"message": "Database seeded successfully", "count": len(exercises)}
