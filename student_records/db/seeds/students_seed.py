from typing import List

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from student_records.db.models import Student
from student_records.schemas.student_schemas import StudentPayload
from student_records.utils.logging import get_logger

logger = get_logger()

SAMPLE_STUDENTS = [
    {
        "firstName": "John",
        "lastName": "Doe",
        "city": "New York",
        "email": "john.doe@email.com",
        "phone": "1234567890",
        "bio": "Computer Science student passionate about web development.",
        "tenthMarks": 85,
        "twelfthMarks": 92,
        "degreeType": "BTech",
        "yearsOfStudy": 3,
    },
    {
        "firstName": "Jane",
        "lastName": "Smith",
        "city": "Boston",
        "email": "jane.smith@email.com",
        "phone": "9876543210",
        "bio": "Business student interested in marketing and analytics.",
        "tenthMarks": 90,
        "twelfthMarks": 88,
        "degreeType": "BBA",
        "yearsOfStudy": 2,
    },
    {
        "firstName": "Priya",
        "lastName": "Sharma",
        "city": "Pune",
        "email": "priya.sharma@email.com",
        "phone": "9123456780",
        "bio": "Postgraduate researcher working on applied statistics.",
        "tenthMarks": 94,
        "twelfthMarks": 91,
        "degreeType": "MSc",
        "yearsOfStudy": 1,
    },
]


def sample_payloads() -> List[StudentPayload]:
    return [StudentPayload.model_validate(data) for data in SAMPLE_STUDENTS]


def seed_students(session: Session) -> int:
    """Insert the sample students into an empty table; returns rows added."""
    existing = session.execute(select(func.count(Student.id))).scalar_one()
    if existing:
        logger.info(f"Skipping student seed, {existing} students already present")
        return 0

    for payload in sample_payloads():
        session.add(Student(**payload.model_dump()))
    session.commit()

    logger.info(f"Seeded {len(SAMPLE_STUDENTS)} students")
    return len(SAMPLE_STUDENTS)
