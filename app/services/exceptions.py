"""
Service-layer exceptions.

Routers translate these into HTTP responses; anything else raised by the
database propagates unchanged.
"""


class WorkoutServiceError(Exception):
    """Base class for errors raised by the workout services."""


class ValidationError(WorkoutServiceError, ValueError):
    """Input is malformed or out of range; raised before any store access."""


class NoMatchingExercisesError(WorkoutServiceError, LookupError):
    """Neither the equipment filter nor the bodyweight fallback produced a candidate."""

    def __init__(self, available_equipment=None):
        self.available_equipment = list(available_equipment or [])
        super().__init__("No exercises found for the available equipment")


class NotFoundError(WorkoutServiceError, LookupError):
    """A record addressed by id does not exist."""
