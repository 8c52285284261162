"""Main FastAPI application for the exercise tracker."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from api import exercise_router
from api.error_handlers import register_error_handlers
from config.settings import settings
from models.database import (
    init_mongo,
    close_mongo_connection,
    get_users_collection,
)
from services.exercise_service import ExerciseLogService
from services.user_store import MongoUserStore
from utils.logger import setup_logger

logger = setup_logger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent


def resolve_dir(path: str) -> Path:
    """Resolve a configured directory against the project root."""
    candidate = Path(path)
    return candidate if candidate.is_absolute() else BASE_DIR / candidate


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    # Startup
    logger.info("Starting application...")
    await init_mongo()
    app.state.exercise_service = ExerciseLogService(MongoUserStore(get_users_collection()))
    logger.info("Application started successfully")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await close_mongo_connection()
    logger.info("Application shut down")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Track users and their logged exercises",
    lifespan=lifespan
)

# Wildcard origins cannot be combined with credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.mount(
    "/public",
    StaticFiles(directory=resolve_dir(settings.static_dir), check_dir=False),
    name="public",
)

app.include_router(exercise_router.router)


@app.get("/", include_in_schema=False)
async def root():
    """Landing page."""
    return FileResponse(resolve_dir(settings.views_dir) / "index.html")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.app_name
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
