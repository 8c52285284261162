"""Error hierarchy for the exercise tracker.

Handled cases (missing input, unknown user, failed save) are answered inline
by the route handlers as ``{"error": ...}`` bodies. The exceptions below are
the ones escalated to the application-wide handlers in
``api.error_handlers``, which answer in plain text.
"""

from typing import Iterable, List, Optional, Tuple

from pydantic import ValidationError


class ServiceError(Exception):
    """Base error carrying the HTTP status and message to answer with."""

    status: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, status: Optional[int] = None):
        if message is not None:
            self.message = message
        if status is not None:
            self.status = status
        super().__init__(self.message)


class NotFoundError(ServiceError):
    """No route or resource matched the request."""

    status = 404
    message = "not found"


class StoreUnavailableError(ServiceError):
    """A record lookup failed at the store."""


class RecordValidationError(ServiceError):
    """A record failed schema validation while being constructed.

    ``errors`` keeps the (field, message) pairs in the order the schema
    reported them; the first pair is the one reported to the client.
    """

    status = 400

    def __init__(self, errors: Iterable[Tuple[str, str]]):
        self.errors: List[Tuple[str, str]] = list(errors)
        message = self.errors[0][1] if self.errors else "validation failed"
        super().__init__(message)

    @property
    def first_message(self) -> str:
        return self.errors[0][1] if self.errors else self.message

    @classmethod
    def from_error_list(cls, errors: Iterable[dict]) -> "RecordValidationError":
        """Build from pydantic-style error dicts (``loc`` / ``msg``)."""
        pairs = []
        for error in errors:
            loc = error.get("loc") or ()
            field = ".".join(str(part) for part in loc if part != "body")
            pairs.append((field, error.get("msg", "invalid value")))
        return cls(pairs)

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "RecordValidationError":
        return cls.from_error_list(exc.errors())
