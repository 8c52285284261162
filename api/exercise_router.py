"""Exercise tracker API routes."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from api.dependencies import get_exercise_service, read_payload
from core.errors import RecordValidationError
from schemas import AddExerciseRequest, LogQuery, NewUserRequest
from services.exercise_service import ExerciseLogService
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/exercise", tags=["exercise"])


def respond(body) -> Response:
    """JSON response, or an empty 204 when the operation did nothing."""
    if body is None:
        return Response(status_code=204)
    return JSONResponse(content=body)


@router.post("/new-user")
async def create_user(
    request: Request,
    service: ExerciseLogService = Depends(get_exercise_service),
):
    """Create a user from ``username``; returns ``{username, _id}``."""
    payload = await read_payload(request, NewUserRequest)
    return respond(await service.create_user(payload))


@router.post("/add")
async def add_exercise(
    request: Request,
    service: ExerciseLogService = Depends(get_exercise_service),
):
    """Append an exercise to the user named by ``userId``; returns the full user."""
    payload = await read_payload(request, AddExerciseRequest)
    return respond(await service.add_exercise(payload))


@router.get("/users")
async def list_users(service: ExerciseLogService = Depends(get_exercise_service)):
    """List every user as ``{username, _id}``."""
    return respond(await service.list_users())


@router.get("/log")
async def get_log(
    request: Request,
    service: ExerciseLogService = Depends(get_exercise_service),
):
    """Get a user's exercise log, optionally narrowed by ``from``, ``to`` and ``limit``."""
    try:
        query = LogQuery.model_validate(dict(request.query_params))
    except ValidationError as e:
        raise RecordValidationError.from_validation_error(e) from e
    return respond(await service.get_log(query))
