from .base import StudentStore
from .memory import InMemoryStudentStore
from .rest import RestStudentStore
from .database import DatabaseStudentStore
from .factory import build_student_store

__all__ = [
    "StudentStore",
    "InMemoryStudentStore",
    "RestStudentStore",
    "DatabaseStudentStore",
    "build_student_store",
]
