"""Root conftest — shared test configuration and an in-memory user store."""

import os

# Ensure tests never point at a real database
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/exercise_tracker_test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient

from api.dependencies import get_exercise_service
from api.main import app
from models.schemas import User
from services.exercise_service import ExerciseLogService
from services.user_store import Found, NotFound, Saved, StoreFailure


class InMemoryUserStore:
    """UserStore keeping copies of users in insertion order.

    ``fail_lookups`` / ``fail_saves`` make the matching operations report a
    store failure.
    """

    def __init__(self):
        self.users = {}
        self.fail_lookups = False
        self.fail_saves = False

    async def _find(self, predicate):
        if self.fail_lookups:
            return StoreFailure("lookup failed")
        for user in self.users.values():
            if predicate(user):
                return Found(user.model_copy(deep=True))
        return NotFound()

    async def find_by_id(self, user_id):
        return await self._find(lambda user: user.id == user_id)

    async def find_by_username(self, username):
        return await self._find(lambda user: user.username == username)

    async def find_all(self):
        if self.fail_lookups:
            return StoreFailure("lookup failed")
        return [user.model_copy(deep=True) for user in self.users.values()]

    async def save(self, user: User):
        if self.fail_saves:
            return StoreFailure("save failed")
        self.users[user.id] = user.model_copy(deep=True)
        return Saved(user)


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def service(store):
    return ExerciseLogService(store)


@pytest.fixture
async def client(service):
    """FastAPI test client with the service dependency overridden."""
    app.dependency_overrides[get_exercise_service] = lambda: service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
