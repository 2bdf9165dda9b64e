from fastapi import APIRouter, Request

from student_records.config.settings import settings
from student_records.utils.responses import ResponseBuilder

health_router = APIRouter()


@health_router.get("/")
async def health_check(request: Request):
    """
    Basic health check endpoint

    Reports the service version and which record store is active
    """
    store = request.app.state.student_store
    return ResponseBuilder.success(
        request=request,
        data={
            "status": "healthy",
            "service": settings.NAME,
            "version": settings.VERSION,
            "storeBackend": store.backend,
        },
        message="Service is running",
    )
