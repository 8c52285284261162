"""Record store for users and their embedded exercises.

Lookups and saves return tagged results instead of raising, so handlers can
turn each outcome into the response defined for it. Writes replace the whole
user document; concurrent read-modify-write cycles on one user are not
serialized and the last save wins.
"""

from dataclasses import dataclass
from typing import List, Protocol, Union

from pymongo.errors import PyMongoError

from models.schemas import User
from utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class Found:
    user: User


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Saved:
    user: User


@dataclass(frozen=True)
class StoreFailure:
    reason: str


LookupResult = Union[Found, NotFound, StoreFailure]
SaveResult = Union[Saved, StoreFailure]


class UserStore(Protocol):
    """Operations the service needs from the persistence layer."""

    async def find_by_id(self, user_id: str) -> LookupResult: ...

    async def find_by_username(self, username: str) -> LookupResult: ...

    async def find_all(self) -> Union[List[User], StoreFailure]: ...

    async def save(self, user: User) -> SaveResult: ...


class MongoUserStore:
    """``UserStore`` backed by a Motor collection."""

    def __init__(self, collection):
        self.collection = collection

    async def _find_one(self, query: dict) -> LookupResult:
        try:
            document = await self.collection.find_one(query)
        except PyMongoError as e:
            logger.error(f"User lookup {query} failed: {e}", exc_info=True)
            return StoreFailure(str(e))
        if document is None:
            return NotFound()
        return Found(User.model_validate(document))

    async def find_by_id(self, user_id: str) -> LookupResult:
        return await self._find_one({"_id": user_id})

    async def find_by_username(self, username: str) -> LookupResult:
        return await self._find_one({"username": username})

    async def find_all(self) -> Union[List[User], StoreFailure]:
        try:
            documents = await self.collection.find({}).to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Listing users failed: {e}", exc_info=True)
            return StoreFailure(str(e))
        return [User.model_validate(document) for document in documents]

    async def save(self, user: User) -> SaveResult:
        try:
            await self.collection.replace_one(
                {"_id": user.id}, user.to_document(), upsert=True
            )
        except PyMongoError as e:
            logger.error(f"Saving user {user.id} failed: {e}", exc_info=True)
            return StoreFailure(str(e))
        return Saved(user)
