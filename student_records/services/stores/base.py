from abc import ABC, abstractmethod
from typing import List

from student_records.schemas.student_schemas import StudentPayload, StudentRecord


class StudentStore(ABC):
    """
    Persistence boundary for student records.

    Implementations acquire and release their connection inside each call;
    nothing is held open between calls.
    """

    backend: str = "abstract"

    @abstractmethod
    async def list(self) -> List[StudentRecord]:
        """Return every stored record.

        Raises:
            ConnectivityError: the backend could not be reached.
        """

    @abstractmethod
    async def create(self, payload: StudentPayload) -> StudentRecord:
        """Persist a new record and return it with its assigned id.

        Raises:
            ConnectivityError: the backend could not be reached.
            PersistenceError: the backend rejected the write.
        """

    @abstractmethod
    async def update(self, student_id: int, payload: StudentPayload) -> StudentRecord:
        """Replace every field of the record with ``student_id``.

        Raises:
            NotFoundError: no record has that id.
            ConnectivityError: the backend could not be reached.
            PersistenceError: the backend rejected the write.
        """

    @abstractmethod
    async def delete(self, student_id: int) -> None:
        """Remove the record with ``student_id``.

        Raises:
            NotFoundError: no record has that id, including repeated deletes.
            ConnectivityError: the backend could not be reached.
            PersistenceError: the backend rejected the delete.
        """
