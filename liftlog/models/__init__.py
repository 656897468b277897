"""ORM models - import all so Base.metadata is complete for migrations."""

from liftlog.models.routine import ExerciseTemplate, Routine, RoutineDay
from liftlog.models.workout import SetLog, WorkoutSession

__all__ = [
    "ExerciseTemplate",
    "Routine",
    "RoutineDay",
    "SetLog",
    "WorkoutSession",
]
