import itertools
from typing import Dict, Iterable, List, Optional

from student_records.schemas.student_schemas import StudentPayload, StudentRecord
from student_records.services.stores.base import StudentStore
from student_records.utils.errors import NotFoundError
from student_records.utils.logging import get_logger

logger = get_logger()


class InMemoryStudentStore(StudentStore):
    """Student records held in process memory, in insertion order"""

    backend = "memory"

    def __init__(self, initial: Optional[Iterable[StudentPayload]] = None):
        self._records: Dict[int, StudentRecord] = {}
        self._ids = itertools.count(1)
        for payload in initial or []:
            self._insert(payload)

    def _insert(self, payload: StudentPayload) -> StudentRecord:
        record = StudentRecord(id=next(self._ids), **payload.model_dump())
        self._records[record.id] = record
        return record

    async def list(self) -> List[StudentRecord]:
        # Copies, so callers cannot change stored state
        return [record.model_copy() for record in self._records.values()]

    async def create(self, payload: StudentPayload) -> StudentRecord:
        record = self._insert(payload)
        logger.info(f"Created student {record.id} in memory store")
        return record.model_copy()

    async def update(self, student_id: int, payload: StudentPayload) -> StudentRecord:
        if student_id not in self._records:
            raise NotFoundError(
                f"Student {student_id} not found", student_id=student_id
            )

        record = StudentRecord(id=student_id, **payload.model_dump())
        self._records[student_id] = record
        logger.info(f"Updated student {student_id} in memory store")
        return record.model_copy()

    async def delete(self, student_id: int) -> None:
        if self._records.pop(student_id, None) is None:
            raise NotFoundError(
                f"Student {student_id} not found", student_id=student_id
            )
        logger.info(f"Deleted student {student_id} from memory store")
