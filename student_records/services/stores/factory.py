from fastapi import Request

from student_records.config.settings import Settings
from student_records.db.models import Base
from student_records.db.session import create_db_engine, create_session_factory
from student_records.services.stores.base import StudentStore
from student_records.services.stores.database import DatabaseStudentStore
from student_records.services.stores.memory import InMemoryStudentStore
from student_records.services.stores.rest import RestStudentStore
from student_records.utils.logging import get_logger

logger = get_logger()

STORE_BACKENDS = ("memory", "rest", "database")


def build_student_store(settings: Settings) -> StudentStore:
    """Create the record store selected by ``STORE_BACKEND``."""
    backend = settings.STORE_BACKEND

    if backend == "memory":
        store: StudentStore = InMemoryStudentStore()
    elif backend == "rest":
        store = RestStudentStore(
            base_url=settings.STUDENTS_API_BASE_URL,
            timeout=settings.STUDENTS_API_TIMEOUT,
        )
    elif backend == "database":
        engine = create_db_engine(settings.DATABASE_URL)
        Base.metadata.create_all(engine)
        store = DatabaseStudentStore(create_session_factory(engine))
    else:
        raise ValueError(
            f"Unknown STORE_BACKEND '{backend}', expected one of {', '.join(STORE_BACKENDS)}"
        )

    logger.info(f"Using {store.backend} student store")
    return store


def get_student_store(request: Request) -> StudentStore:
    """Dependency returning the store owned by the running application"""
    return request.app.state.student_store
