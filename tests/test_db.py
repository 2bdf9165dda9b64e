import pytest
from sqlalchemy import inspect

from student_records.db.db import drop_tables, reset_db, seed_db
from student_records.db.seeds.students_seed import SAMPLE_STUDENTS
from student_records.services.stores import DatabaseStudentStore

pytestmark = pytest.mark.integration


def test_seed_fills_empty_table_once(db_engine):
    assert seed_db(db_engine) == len(SAMPLE_STUDENTS)
    assert seed_db(db_engine) == 0


@pytest.mark.asyncio
async def test_seeded_students_readable_through_store(db_engine, db_store: DatabaseStudentStore):
    seed_db(db_engine)

    students = await db_store.list()

    assert [s.full_name for s in students] == ["John Doe", "Jane Smith", "Priya Sharma"]


@pytest.mark.asyncio
async def test_reset_restores_sample_data(db_engine, db_store, valid_payload):
    await db_store.create(valid_payload)
    await db_store.create(valid_payload)

    reset_db(db_engine)

    assert len(await db_store.list()) == len(SAMPLE_STUDENTS)


def test_drop_tables(db_engine):
    drop_tables(db_engine)

    assert not inspect(db_engine).has_table("students")
