import os

os.environ.setdefault("ENVIRONMENT", "test")

import json
import re
from typing import Any, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from student_records.db.models import Base
from student_records.db.session import create_db_engine, create_session_factory
from student_records.main import create_application
from student_records.schemas.student_schemas import StudentPayload
from student_records.services.stores import (
    DatabaseStudentStore,
    InMemoryStudentStore,
    RestStudentStore,
)

TEST_DATABASE_URL = "sqlite:///:memory:"
TEST_API_BASE_URL = "http://students.test"

DEGREE_CYCLE = ["BSc", "BTech", "BA", "MBA", "MSc"]
CITY_CYCLE = ["New York", "Boston", "Chicago", "Pune"]


def student_data(**overrides: Any) -> Dict[str, Any]:
    """A valid student form in camelCase, as a client would send it."""
    data = {
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
    }
    data.update(overrides)
    return data


def numbered_student_data(n: int) -> Dict[str, Any]:
    return student_data(
        firstName=f"Student{n:02d}",
        lastName=f"Tester{n:02d}",
        city=CITY_CYCLE[n % len(CITY_CYCLE)],
        email=f"student{n:02d}@example.com",
        phone=f"{9000000000 + n}",
        degreeType=DEGREE_CYCLE[n % len(DEGREE_CYCLE)],
        yearsOfStudy=(n % 10) + 1,
    )


class FakeStudentsBackend:
    """Plain-JSON /students resource served through httpx.MockTransport."""

    def __init__(self):
        self.records: Dict[int, Dict[str, Any]] = {}
        self.next_id = 1
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/students":
            if request.method == "GET":
                return httpx.Response(200, json=list(self.records.values()))
            if request.method == "POST":
                body = json.loads(request.content)
                body["id"] = self.next_id
                self.next_id += 1
                self.records[body["id"]] = body
                return httpx.Response(201, json=body)

        match = re.fullmatch(r"/students/(\d+)", path)
        if match:
            student_id = int(match.group(1))
            if student_id not in self.records:
                return httpx.Response(404, json={"message": "Student not found"})
            if request.method == "PUT":
                body = json.loads(request.content)
                body["id"] = student_id
                self.records[student_id] = body
                return httpx.Response(200, json=body)
            if request.method == "DELETE":
                del self.records[student_id]
                return httpx.Response(204)

        return httpx.Response(405)


@pytest.fixture
def valid_data() -> Dict[str, Any]:
    return student_data()


@pytest.fixture
def valid_payload() -> StudentPayload:
    return StudentPayload.model_validate(student_data())


@pytest.fixture
def memory_store() -> InMemoryStudentStore:
    return InMemoryStudentStore()


@pytest.fixture
def db_engine():
    engine = create_db_engine(TEST_DATABASE_URL)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_store(db_engine) -> DatabaseStudentStore:
    return DatabaseStudentStore(create_session_factory(db_engine))


@pytest.fixture
def fake_backend() -> FakeStudentsBackend:
    return FakeStudentsBackend()


@pytest.fixture
def rest_store(fake_backend) -> RestStudentStore:
    return RestStudentStore(
        TEST_API_BASE_URL, transport=httpx.MockTransport(fake_backend)
    )


@pytest.fixture(params=["memory", "db", "rest"])
def store(request):
    """Each store strategy, for tests of the shared contract."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def app(memory_store):
    return create_application(store=memory_store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_student_data():
    return student_data


@pytest.fixture
def make_numbered_data():
    return numbered_student_data
