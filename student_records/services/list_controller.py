from typing import List, Optional

from student_records.schemas.notification_schemas import Notification
from student_records.schemas.student_schemas import StudentRecord
from student_records.services.query_view import PAGE_SIZE, StudentPage, project
from student_records.services.stores.base import StudentStore
from student_records.utils.errors import StoreError
from student_records.utils.logging import get_logger

logger = get_logger()


class StudentListController:
    """Search, paging and delete confirmation over the stored students"""

    def __init__(self, store: StudentStore, page_size: int = PAGE_SIZE):
        self.store = store
        self.page_size = page_size
        self.search_term = ""
        self.page = 1
        self.students: List[StudentRecord] = []
        self.view = StudentPage(page_size=page_size)
        self.pending_delete_id: Optional[int] = None
        self.notification: Optional[Notification] = None
        self.error: Optional[StoreError] = None
        self.is_loading = False

    def _recompute(self) -> StudentPage:
        self.view = project(self.students, self.search_term, self.page, self.page_size)
        self.page = self.view.page
        return self.view

    async def refresh(self) -> StudentPage:
        """Re-fetch every record and rebuild the current page."""
        self.is_loading = True
        self.error = None
        try:
            self.students = await self.store.list()
        except StoreError as e:
            logger.error(f"Fetching students failed: {e.message}")
            self.error = e
            self.notification = Notification.info(
                "Error", "Could not fetch student records"
            )
        finally:
            self.is_loading = False
        return self._recompute()

    def search(self, term: str) -> StudentPage:
        self.search_term = term or ""
        self.page = 1
        return self._recompute()

    def go_to_page(self, page: int) -> StudentPage:
        self.page = page
        return self._recompute()

    @property
    def empty_message(self) -> str:
        if self.search_term:
            return "No students found matching your search"
        return "No students added yet"

    @property
    def pending_delete(self) -> Optional[StudentRecord]:
        return next(
            (s for s in self.students if s.id == self.pending_delete_id), None
        )

    def request_delete(self, student_id: int) -> str:
        """Mark a record for deletion and return the confirmation prompt."""
        self.pending_delete_id = student_id
        student = self.pending_delete
        name = student.full_name if student else f"student {student_id}"
        return f"Are you sure you want to delete {name}? This action cannot be undone."

    def cancel_delete(self) -> None:
        self.pending_delete_id = None

    async def confirm_delete(self) -> bool:
        """
        Delete the pending record; returns False when the store refused.

        Removing the last row of a later page leaves the view on the page
        before it, since the refreshed projection clamps to the last page.
        """
        if self.pending_delete_id is None:
            raise ValueError("No student deletion is awaiting confirmation")

        student_id = self.pending_delete_id
        self.pending_delete_id = None
        self.error = None
        try:
            await self.store.delete(student_id)
        except StoreError as e:
            logger.error(f"Deleting student {student_id} failed: {e.message}")
            self.error = e
            self.notification = Notification.info("Error", "Could not delete student")
            return False

        await self.refresh()
        if self.error is None:
            self.notification = Notification.destructive(
                "Deleted!", "Student record deleted successfully."
            )
        return True
