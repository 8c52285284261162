"""Exercise sub-document schema."""

import math
from datetime import datetime
from typing import Any, Union

from pydantic import BaseModel, Field, field_serializer, field_validator
from pydantic_core import PydanticCustomError

from utils.helpers import isoformat_date, parse_date, utc_now


class Exercise(BaseModel):
    """A logged exercise, embedded in its owner's ``exercises`` array."""
    description: str = Field(..., min_length=1, description="What was done")
    duration: Union[int, float] = Field(..., description="Duration in minutes")
    date: datetime = Field(default_factory=utc_now, description="When it was done (UTC)")

    @field_validator("duration", mode="before")
    @classmethod
    def cast_duration(cls, value: Any) -> Union[int, float]:
        # Booleans cast to 1 / 0
        if isinstance(value, bool):
            return int(value)
        number = None
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            try:
                number = float(value.strip())
            except ValueError:
                number = None
        if number is None or math.isnan(number) or math.isinf(number):
            raise PydanticCustomError(
                "number_cast",
                'Cast to Number failed for value "{value}" at path "duration"',
                {"value": value},
            )
        return int(number) if number.is_integer() else number

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, value: Any) -> Any:
        # Stored dates are naive UTC; leave anything unparseable to pydantic
        parsed = parse_date(value)
        return parsed if parsed is not None else value

    @field_serializer("date", when_used="json")
    def serialize_date(self, value: datetime) -> str:
        return isoformat_date(value)
