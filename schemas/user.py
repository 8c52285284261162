"""User request and response schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NewUserRequest(BaseModel):
    """Body of ``POST /api/exercise/new-user``."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    username: Optional[str] = Field(None, description="Requested username")


class UserSummary(BaseModel):
    """``{username, _id}`` projection of a user."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    id: str = Field(..., alias="_id")
