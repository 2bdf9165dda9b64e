from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from student_records.schemas.student_schemas import StudentPayload, StudentRecord
from student_records.services.stores.base import StudentStore
from student_records.utils.errors import (
    ConnectivityError,
    NotFoundError,
    PersistenceError,
)
from student_records.utils.logging import get_logger

logger = get_logger()


class RestStudentStore(StudentStore):
    """
    Client for a remote ``/students`` JSON resource.

    Each operation opens its own ``httpx.AsyncClient`` and closes it before
    returning. Bodies use the camelCase field names.
    """

    backend = "rest"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            headers={"Accept": "application/json"},
        )

    async def _send(
        self,
        method: str,
        path: str,
        json: Optional[dict] = None,
        student_id: Optional[int] = None,
    ) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.request(method, path, json=json)
        except httpx.RequestError as e:
            logger.error(f"{method} {self.base_url}{path} failed: {e!r}")
            raise ConnectivityError(
                f"Could not reach student API at {self.base_url}"
            ) from e

        if response.status_code == 404 and student_id is not None:
            raise NotFoundError(
                f"Student {student_id} not found", student_id=student_id
            )
        if not response.is_success:
            logger.error(
                f"{method} {path} rejected: {response.status_code} - {response.text}"
            )
            raise PersistenceError(
                f"Student API rejected {method} {path} with status {response.status_code}"
            )
        return response

    @staticmethod
    def _parse_record(body: Any) -> StudentRecord:
        try:
            return StudentRecord.model_validate(body)
        except ValidationError as e:
            raise PersistenceError(
                f"Student API returned an invalid record: {e.error_count()} error(s)"
            ) from e

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise PersistenceError("Student API returned a non-JSON body") from e

    async def list(self) -> List[StudentRecord]:
        response = await self._send("GET", "/students")
        body = self._json(response)
        if not isinstance(body, list):
            raise PersistenceError("Student API returned a non-list body for /students")
        return [self._parse_record(item) for item in body]

    async def create(self, payload: StudentPayload) -> StudentRecord:
        response = await self._send(
            "POST", "/students", json=payload.model_dump(by_alias=True)
        )
        record = self._parse_record(self._json(response))
        logger.info(f"Created student {record.id} via {self.base_url}")
        return record

    async def update(self, student_id: int, payload: StudentPayload) -> StudentRecord:
        response = await self._send(
            "PUT",
            f"/students/{student_id}",
            json=payload.model_dump(by_alias=True),
            student_id=student_id,
        )
        record = self._parse_record(self._json(response))
        logger.info(f"Updated student {student_id} via {self.base_url}")
        return record

    async def delete(self, student_id: int) -> None:
        await self._send("DELETE", f"/students/{student_id}", student_id=student_id)
        logger.info(f"Deleted student {student_id} via {self.base_url}")
