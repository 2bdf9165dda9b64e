from contextlib import contextmanager
from typing import Iterator, List

from sqlalchemy import select, update, delete
from sqlalchemy.exc import (
    DisconnectionError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.orm import Session, sessionmaker

from student_records.db.models import Student
from student_records.schemas.student_schemas import StudentPayload, StudentRecord
from student_records.services.stores.base import StudentStore
from student_records.utils.errors import (
    ConnectivityError,
    NotFoundError,
    PersistenceError,
)
from student_records.utils.logging import get_logger

logger = get_logger()

CONNECTIVITY_ERRORS = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    PoolTimeoutError,
)


class DatabaseStudentStore(StudentStore):
    """Student records in the ``students`` table, one session per operation"""

    backend = "database"

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        try:
            with self.session_factory() as session:
                yield session
        except CONNECTIVITY_ERRORS as e:
            logger.error(f"Database unreachable during {operation}: {e}")
            raise ConnectivityError("Could not connect to the student database") from e
        except SQLAlchemyError as e:
            logger.error(f"Database rejected {operation}: {e}")
            raise PersistenceError(f"Database rejected {operation} of student record") from e

    @staticmethod
    def _to_record(student: Student) -> StudentRecord:
        return StudentRecord.model_validate(student, from_attributes=True)

    async def list(self) -> List[StudentRecord]:
        with self._session("list") as session:
            result = session.execute(select(Student).order_by(Student.id))
            return [self._to_record(student) for student in result.scalars().all()]

    async def create(self, payload: StudentPayload) -> StudentRecord:
        with self._session("create") as session:
            student = Student(**payload.model_dump())
            session.add(student)
            session.commit()
            session.refresh(student)

            logger.info(f"Created student {student.id} in database")
            return self._to_record(student)

    async def update(self, student_id: int, payload: StudentPayload) -> StudentRecord:
        values = payload.model_dump()
        with self._session("update") as session:
            result = session.execute(
                update(Student).where(Student.id == student_id).values(**values)
            )
            if result.rowcount == 0:
                session.rollback()
                raise NotFoundError(
                    f"Student {student_id} not found", student_id=student_id
                )
            session.commit()

        logger.info(f"Updated student {student_id} in database")
        return StudentRecord(id=student_id, **values)

    async def delete(self, student_id: int) -> None:
        with self._session("delete") as session:
            result = session.execute(delete(Student).where(Student.id == student_id))
            if result.rowcount == 0:
                session.rollback()
                raise NotFoundError(
                    f"Student {student_id} not found", student_id=student_id
                )
            session.commit()

        logger.info(f"Deleted student {student_id} from database")
