from typing import Annotated, Any, Dict

from fastapi import APIRouter, Body, Depends, Path, Query, Request, status

from student_records.schemas.student_schemas import degree_options
from student_records.services.form_controller import StudentFormController
from student_records.services.list_controller import StudentListController
from student_records.services.stores.base import StudentStore
from student_records.services.stores.factory import get_student_store
from student_records.utils.responses import ResponseBuilder

students_router = APIRouter()


@students_router.get(
    "/degree-types",
    response_model=None,
    status_code=status.HTTP_200_OK,
    summary="Get the degree catalog",
    description="Degree codes accepted for a student's degree type, with display labels.",
)
async def get_degree_types(request: Request):
    options = [option.model_dump(by_alias=True) for option in degree_options()]
    return ResponseBuilder.success(
        request=request,
        data=options,
        message=f"Retrieved {len(options)} degree types",
    )


@students_router.get(
    "",
    response_model=None,
    status_code=status.HTTP_200_OK,
    summary="Search and page through students",
    description="Case-insensitive search over name, email, city and degree type. Ten students per page; out-of-range pages clamp to the nearest valid page.",
)
async def get_students(
    request: Request,
    search: Annotated[str, Query(description="Search term")] = "",
    page: Annotated[int, Query(description="1-based page number")] = 1,
    store: StudentStore = Depends(get_student_store),
):
    """Get one page of the filtered student list"""
    controller = StudentListController(store)
    controller.search_term = search
    controller.page = page

    view = await controller.refresh()
    if controller.error is not None:
        raise controller.error

    return ResponseBuilder.paginated(
        request=request,
        view=view,
        message=view.summary if view.total else controller.empty_message,
    )


@students_router.post(
    "",
    response_model=None,
    status_code=status.HTTP_201_CREATED,
    summary="Create a student",
    description="Validate every field and store a new student record. Field errors are returned together.",
)
async def create_student(
    request: Request,
    student_data: Annotated[Dict[str, Any], Body(description="Student fields")],
    store: StudentStore = Depends(get_student_store),
):
    """Create a new student record"""
    controller = StudentFormController(store)
    result = await controller.submit(student_data)
    result.raise_for_error()

    return ResponseBuilder.success(
        request=request,
        data=result.record.model_dump(by_alias=True),
        message=result.notification.description,
        status_code=status.HTTP_201_CREATED,
    )


@students_router.put(
    "/{student_id}",
    response_model=None,
    status_code=status.HTTP_200_OK,
    summary="Replace a student",
    description="Validate every field and fully replace the stored student record.",
)
async def update_student(
    request: Request,
    student_data: Annotated[Dict[str, Any], Body(description="Student fields")],
    student_id: Annotated[int, Path(description="Student ID to update")],
    store: StudentStore = Depends(get_student_store),
):
    """Replace an existing student record"""
    controller = StudentFormController(store)
    controller.bind(student_id)
    result = await controller.submit(student_data)
    result.raise_for_error()

    return ResponseBuilder.success(
        request=request,
        data=result.record.model_dump(by_alias=True),
        message=result.notification.description,
    )


@students_router.delete(
    "/{student_id}",
    response_model=None,
    status_code=status.HTTP_200_OK,
    summary="Delete a student",
    description="Delete a student record. The request itself is the confirmation.",
)
async def delete_student(
    request: Request,
    student_id: Annotated[int, Path(description="Student ID to delete")],
    store: StudentStore = Depends(get_student_store),
):
    """Delete a student record"""
    controller = StudentListController(store)
    controller.request_delete(student_id)
    if not await controller.confirm_delete():
        raise controller.error

    return ResponseBuilder.success(
        request=request,
        data={"id": student_id},
        message="Student record deleted successfully.",
    )
