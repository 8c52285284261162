"""Request payloads and response projections."""

from schemas.exercise import AddExerciseRequest, ExerciseEntry, ExerciseLog, LogQuery
from schemas.user import NewUserRequest, UserSummary

__all__ = [
    "AddExerciseRequest",
    "ExerciseEntry",
    "ExerciseLog",
    "LogQuery",
    "NewUserRequest",
    "UserSummary",
]
