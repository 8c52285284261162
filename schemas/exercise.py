"""Exercise request and response schemas."""

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from utils.helpers import isoformat_date


class AddExerciseRequest(BaseModel):
    """Body of ``POST /api/exercise/add``; presence is checked by the service."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    userId: Optional[str] = None
    description: Optional[str] = None
    duration: Any = None
    date: Optional[str] = None


class LogQuery(BaseModel):
    """Query string of ``GET /api/exercise/log``."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    userId: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    limit: Optional[str] = None


class ExerciseEntry(BaseModel):
    """Log entry as returned to clients."""
    description: str
    duration: Union[int, float]
    date: datetime

    @field_serializer("date", when_used="json")
    def serialize_date(self, value: datetime) -> str:
        return isoformat_date(value)


class ExerciseLog(BaseModel):
    """Filtered exercise log of one user."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    id: str = Field(..., alias="_id")
    total_exercise_count: int = Field(..., description="Exercise count before filtering")
    log: List[ExerciseEntry] = Field(default_factory=list)
