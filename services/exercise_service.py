"""Exercise log service: users, their exercises and the filtered log.

Each operation returns the JSON body to answer with, or None when the
request is missing the identifying field and nothing is done. Expected
failures (unknown user, missing fields, failed save) come back as
``{"error": <reason>}`` bodies; failed lookups and records that fail
validation are raised for the application error handlers.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import ValidationError

from core.errors import RecordValidationError, StoreUnavailableError
from models.schemas import Exercise, User
from schemas import (
    AddExerciseRequest,
    ExerciseEntry,
    ExerciseLog,
    LogQuery,
    NewUserRequest,
    UserSummary,
)
from services.user_store import LookupResult, NotFound, StoreFailure, UserStore
from utils.helpers import parse_date, parse_limit
from utils.logger import setup_logger

logger = setup_logger(__name__)

USER_EXISTS = "user exists"
SAVE_FAILURE = "save failure"
USER_NOT_FOUND = "user not found"
FIELDS_MISSING = "description or duration missing"
EXERCISE_SAVE_FAILURE = "exercise save failure"
USERS_UNAVAILABLE = "error retrieving users"


def error_body(reason: str) -> dict:
    return {"error": reason}


def filter_log(
    exercises: List[Exercise],
    from_date: Optional[datetime] = None,
    to_date: Optional[datetime] = None,
    limit: Optional[float] = None,
) -> List[Exercise]:
    """Apply the log filters in order: lower bound, upper bound, then limit.

    Both bounds are inclusive. The limit keeps the earliest-appended entries
    of what the date bounds left; a fractional limit is truncated and a
    negative one drops that many entries from the end.
    """
    if from_date is not None:
        exercises = [item for item in exercises if item.date >= from_date]
    if to_date is not None:
        exercises = [item for item in exercises if item.date <= to_date]
    if limit is not None and len(exercises) > limit:
        exercises = exercises[:int(limit)]
    return exercises


def unwrap_lookup(result: LookupResult) -> Optional[User]:
    """Return the found user, None when absent; raise when the store failed."""
    if isinstance(result, StoreFailure):
        raise StoreUnavailableError()
    if isinstance(result, NotFound):
        return None
    return result.user


class ExerciseLogService:
    """Request-level operations over a ``UserStore``."""

    def __init__(self, store: UserStore):
        self.store = store

    async def create_user(self, payload: NewUserRequest) -> Optional[dict]:
        """Create a user unless one with the same username exists."""
        if not payload.username:
            return None

        # Not atomic: two concurrent creations may both pass this check
        existing = unwrap_lookup(await self.store.find_by_username(payload.username))
        if existing is not None:
            logger.info(f"Username already taken: {payload.username}")
            return error_body(USER_EXISTS)

        try:
            user = User(username=payload.username)
        except ValidationError as e:
            raise RecordValidationError.from_validation_error(e) from e

        result = await self.store.save(user)
        if isinstance(result, StoreFailure):
            return error_body(SAVE_FAILURE)

        logger.info(f"Created user {result.user.id} ({result.user.username})")
        return UserSummary(username=result.user.username, _id=result.user.id).model_dump(by_alias=True)

    async def add_exercise(self, payload: AddExerciseRequest) -> Optional[dict]:
        """Append an exercise to a user's log and return the whole user record."""
        if not payload.userId:
            return None

        user = unwrap_lookup(await self.store.find_by_id(payload.userId))
        if user is None:
            return error_body(USER_NOT_FOUND)
        if not payload.description or not payload.duration:
            return error_body(FIELDS_MISSING)

        fields = {"description": payload.description, "duration": payload.duration}
        date = parse_date(payload.date)
        if date is not None:
            fields["date"] = date
        try:
            exercise = Exercise(**fields)
        except ValidationError as e:
            raise RecordValidationError.from_validation_error(e) from e

        user.exercises.append(exercise)
        result = await self.store.save(user)
        if isinstance(result, StoreFailure):
            return error_body(EXERCISE_SAVE_FAILURE)

        logger.info(f"Added exercise to user {user.id}; log size {len(user.exercises)}")
        return result.user.to_response()

    async def list_users(self):
        """Return ``{username, _id}`` for every user in store order."""
        users = await self.store.find_all()
        if users is None or isinstance(users, StoreFailure):
            return error_body(USERS_UNAVAILABLE)
        return [
            UserSummary(username=user.username, _id=user.id).model_dump(by_alias=True)
            for user in users
        ]

    async def get_log(self, query: LogQuery) -> dict:
        """Return a user's log narrowed by ``from``, ``to`` and ``limit``."""
        if not query.userId:
            return error_body(USER_NOT_FOUND)

        user = unwrap_lookup(await self.store.find_by_id(query.userId))
        if user is None:
            return error_body(USER_NOT_FOUND)

        exercises = filter_log(
            user.exercises,
            from_date=parse_date(query.from_),
            to_date=parse_date(query.to),
            limit=parse_limit(query.limit),
        )
        log = ExerciseLog(
            username=user.username,
            _id=user.id,
            total_exercise_count=len(user.exercises),
            log=[
                ExerciseEntry(description=item.description, duration=item.duration, date=item.date)
                for item in exercises
            ],
        )
        return log.model_dump(by_alias=True, mode="json")
