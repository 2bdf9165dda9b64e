from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_records.config.settings import Settings, settings as default_settings
from student_records.utils.logging import get_logger
from student_records.routers import main_router
from student_records.utils.errors import setup_error_handlers
from student_records.middlewares import RequestIDMiddleware
from student_records.services.stores import StudentStore, build_student_store

# Initialize the logger
logger = get_logger()


@asynccontextmanager
async def lifespan(application: FastAPI):
    logger.info(
        f"{application.title} is starting up with the {application.state.student_store.backend} store..."
    )
    yield
    logger.info(f"{application.title} is shutting down...")


def create_application(
    store: Optional[StudentStore] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Initialize the FastAPI application; each app owns its own record store."""
    app_settings = app_settings or default_settings

    application = FastAPI(
        title=app_settings.NAME, version=app_settings.VERSION, lifespan=lifespan
    )
    application.state.student_store = (
        store if store is not None else build_student_store(app_settings)
    )

    # Setup error handlers
    setup_error_handlers(application)

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_HOSTS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )
    application.add_middleware(RequestIDMiddleware)

    # Routers
    application.include_router(main_router, prefix=app_settings.API_PREFIX, tags=["APIs"])

    return application


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "student_records.main:create_application",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_config=None,
        log_level=None,
    )
