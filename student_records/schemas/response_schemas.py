from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from student_records.schemas.camel_base_model import CamelCaseBaseModel as BaseModel
from student_records.services.query_view import StudentPage


class ResponseStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class PaginationMeta(BaseModel):
    """Where the returned page sits within the filtered student list"""

    page: int = Field(..., description="Current page number, after clamping")
    per_page: int = Field(..., description="Students per page")
    total: int = Field(..., description="Students matching the search")
    total_pages: int = Field(..., description="Pages available for the search")
    has_next: bool
    has_prev: bool

    @classmethod
    def from_page(cls, view: StudentPage) -> "PaginationMeta":
        return cls(
            page=view.page,
            per_page=view.page_size,
            total=view.total,
            total_pages=view.total_pages,
            has_next=view.has_next,
            has_prev=view.has_prev,
        )


class ErrorDetail(BaseModel):
    """One rejected input: a student field or a request parameter"""

    field: str = Field(..., description="camelCase field name or parameter path")
    message: str = Field(..., description="Message to show next to the input")
    type: Optional[str] = Field(None, description="Validation error kind")


class ApiResponse(BaseModel):
    """Envelope around every response the service returns"""

    success: bool
    status: ResponseStatus
    message: str = Field(..., description="Summary or notification text")
    data: Optional[Any] = None
    pagination: Optional[PaginationMeta] = None
    errors: Optional[List[ErrorDetail]] = None
    meta: Optional[Dict[str, Any]] = Field(
        default=None, description="Error code and error type on failures"
    )
    request_id: str = Field(..., description="Value of the X-Request-ID header")
    path: str
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())
