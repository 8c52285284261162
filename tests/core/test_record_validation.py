"""RecordValidationError — ordered (field, message) pairs, first one reported."""

import pytest
from pydantic import ValidationError

from core.errors import NotFoundError, RecordValidationError, ServiceError
from models.schemas import Exercise, User


def test_exercise_duration_must_be_numeric():
    with pytest.raises(ValidationError) as exc_info:
        Exercise(description="run", duration="abc")

    error = RecordValidationError.from_validation_error(exc_info.value)

    assert error.status == 400
    assert error.errors[0][0] == "duration"
    assert error.first_message == 'Cast to Number failed for value "abc" at path "duration"'


def test_errors_keep_declaration_order():
    with pytest.raises(ValidationError) as exc_info:
        Exercise(description="", duration="x")

    error = RecordValidationError.from_validation_error(exc_info.value)

    assert [field for field, _ in error.errors] == ["description", "duration"]
    assert error.message == error.errors[0][1]


def test_numeric_strings_become_numbers():
    assert Exercise(description="run", duration="30").duration == 30
    assert Exercise(description="run", duration="12.5").duration == 12.5


def test_new_user_gets_generated_id_and_empty_log():
    user = User(username="alice")
    assert user.id
    assert user.exercises == []
    assert user.to_response() == {"_id": user.id, "username": "alice", "exercises": []}


def test_service_error_defaults():
    error = ServiceError()
    assert (error.status, error.message) == (500, "Internal Server Error")
    assert (NotFoundError().status, NotFoundError().message) == (404, "not found")


def test_booleans_cast_like_numbers():
    assert Exercise(description="run", duration=True).duration == 1
    assert Exercise(description="run", duration=False).duration == 0
