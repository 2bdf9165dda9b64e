from typing import Optional

from sqlalchemy.engine import Engine

from student_records.config.settings import settings
from .models import Base
from .seeds.students_seed import seed_students
from .session import create_db_engine, create_session_factory

from student_records.utils.logging import get_logger

logger = get_logger()


def _engine(engine: Optional[Engine]) -> Engine:
    return engine or create_db_engine(settings.DATABASE_URL)


def create_tables(engine: Optional[Engine] = None):
    Base.metadata.create_all(_engine(engine))
    logger.info("Created all tables.")


def drop_tables(engine: Optional[Engine] = None):
    Base.metadata.drop_all(_engine(engine))
    logger.info("Dropped all tables.")


def seed_db(engine: Optional[Engine] = None) -> int:
    """Seed the database with sample students"""
    session_factory = create_session_factory(_engine(engine))
    with session_factory() as session:
        return seed_students(session)


def reset_db(engine: Optional[Engine] = None):
    logger.info("Resetting database...")
    engine = _engine(engine)
    drop_tables(engine)
    create_tables(engine)
    seed_db(engine)
    logger.info("Database reset complete.")


if __name__ == "__main__":
    reset_db()
