"""Database models and connection setup."""

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from typing import Optional
from config.settings import settings
from utils.logger import setup_logger

logger = setup_logger(__name__)


class Database:
    """Database connection manager."""

    client: Optional[AsyncIOMotorClient] = None


db = Database()


async def connect_to_mongo():
    """Create database connection."""
    db.client = AsyncIOMotorClient(settings.mongodb_url)
    logger.info(f"Connected to MongoDB database: {get_database().name}")


async def close_mongo_connection():
    """Close database connection."""
    if db.client:
        db.client.close()
        db.client = None
        logger.info("Disconnected from MongoDB")


async def init_mongo():
    """Initialize MongoDB connection and the users collection indexes."""
    await connect_to_mongo()

    # Username uniqueness is enforced by the service, not by the index
    users_collection = get_users_collection()
    await users_collection.create_index([("username", ASCENDING)])

    logger.info("MongoDB initialized: users collection indexed")


def get_database():
    """Get database instance named by the connection URL, or the configured default."""
    return db.client.get_default_database(default=settings.mongodb_database)


def get_users_collection():
    """Get users collection."""
    return get_database().users
