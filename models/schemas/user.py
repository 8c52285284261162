"""User collection schema."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.exercise import Exercise
from utils.helpers import generate_short_id


class User(BaseModel):
    """User collection model; ``_id`` is a generated short identifier."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=generate_short_id, alias="_id", description="Unique user identifier")
    username: str = Field(..., min_length=1, description="Display name, unique per service")
    exercises: List[Exercise] = Field(default_factory=list, description="Exercise log in insertion order")

    def to_document(self) -> dict:
        """Serialize for MongoDB (dates stay ``datetime``)."""
        return self.model_dump(by_alias=True)

    def to_response(self) -> dict:
        """Serialize the full record for a JSON response."""
        return self.model_dump(by_alias=True, mode="json")
