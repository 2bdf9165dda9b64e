from .students import students_router

__all__ = ["students_router"]
