"""Collection schemas organized by collection type."""

from models.schemas.exercise import Exercise
from models.schemas.user import User

__all__ = [
    "Exercise",
    "User",
]
