"""Request-scoped access to the service and request payloads."""

import json
from typing import Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from core.errors import RecordValidationError, ServiceError
from services.exercise_service import ExerciseLogService

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def get_exercise_service(request: Request) -> ExerciseLogService:
    """Return the service built at startup and kept on the application state."""
    return request.app.state.exercise_service


async def read_payload(request: Request, model: Type[PayloadT]) -> PayloadT:
    """Parse a JSON or URL-encoded body into ``model``."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except json.JSONDecodeError as e:
            raise ServiceError("invalid JSON body", status=400) from e
        if not isinstance(data, dict):
            data = {}
    elif content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        data = dict(form)
    else:
        data = {}

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise RecordValidationError.from_validation_error(e) from e
