from typing import Any, Dict, List, Optional
import uuid

from fastapi import status, Request
from fastapi.responses import JSONResponse

from student_records.schemas.response_schemas import (
    ApiResponse,
    PaginationMeta,
    ResponseStatus,
)
from student_records.services.query_view import StudentPage


def _envelope(request: Request, status_code: int, **fields: Any) -> JSONResponse:
    response = ApiResponse(
        request_id=getattr(request.state, "request_id", None) or str(uuid.uuid4()),
        path=request.url.path,
        **fields,
    )
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(by_alias=True, exclude_none=True),
    )


class ResponseBuilder:
    """Builds the ``ApiResponse`` envelope for routes and error handlers"""

    @staticmethod
    def success(
        request: Request,
        data: Any = None,
        message: str = "Request successful",
        status_code: int = status.HTTP_200_OK,
    ) -> JSONResponse:
        return _envelope(
            request,
            status_code,
            success=True,
            status=ResponseStatus.SUCCESS,
            message=message,
            data=data,
        )

    @staticmethod
    def error(
        request: Request,
        message: str,
        error_code: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        errors: Optional[List[Dict[str, Any]]] = None,
        error_type: Optional[str] = None,
    ) -> JSONResponse:
        """Failure envelope; ``meta`` carries the error code and, if given, its type."""
        meta = {"error_code": error_code}
        if error_type:
            meta["error_type"] = error_type

        return _envelope(
            request,
            status_code,
            success=False,
            status=ResponseStatus.ERROR,
            message=message,
            errors=errors,
            meta=meta,
        )

    @staticmethod
    def paginated(request: Request, view: StudentPage, message: str) -> JSONResponse:
        """One page of students; page math comes from the ``StudentPage`` as is."""
        return _envelope(
            request,
            status.HTTP_200_OK,
            success=True,
            status=ResponseStatus.SUCCESS,
            message=message,
            data=[student.model_dump(by_alias=True) for student in view.items],
            pagination=PaginationMeta.from_page(view),
        )
