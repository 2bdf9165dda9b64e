from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from student_records.schemas.notification_schemas import Notification
from student_records.schemas.student_schemas import StudentRecord
from student_records.services.stores.base import StudentStore
from student_records.services.validator import validate_student
from student_records.utils.errors import FieldValidationError, StoreError
from student_records.utils.logging import get_logger

logger = get_logger()

EMPTY_FORM_VALUES: Dict[str, Any] = {
    "firstName": "",
    "lastName": "",
    "city": "",
    "email": "",
    "phone": "",
    "bio": "",
    "tenthMarks": 0,
    "twelfthMarks": 0,
    "degreeType": "",
    "yearsOfStudy": 1,
}


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


@dataclass
class FormResult:
    """Outcome of one form submission"""

    success: bool
    record: Optional[StudentRecord] = None
    errors: Dict[str, str] = field(default_factory=dict)
    notification: Optional[Notification] = None
    error: Optional[StoreError] = None

    def raise_for_error(self) -> None:
        """Re-raise the failure as a typed exception, for callers without a UI."""
        if self.errors:
            raise FieldValidationError(self.errors)
        if self.error is not None:
            raise self.error


class StudentFormController:
    """
    Create-or-edit flow for a single student form.

    With no student bound the form is in create mode and a successful submit
    clears it. With a student bound (``edit``) a successful submit replaces
    that record and the form stays populated.
    """

    def __init__(self, store: StudentStore, student: Optional[StudentRecord] = None):
        self.store = store
        self.student_id: Optional[int] = None
        self.values: Dict[str, Any] = dict(EMPTY_FORM_VALUES)
        self.errors: Dict[str, str] = {}
        self.notification: Optional[Notification] = None
        self.is_submitting = False
        if student is not None:
            self.edit(student)

    @property
    def mode(self) -> FormMode:
        return FormMode.CREATE if self.student_id is None else FormMode.EDIT

    @property
    def title(self) -> str:
        return "Add New Student" if self.mode == FormMode.CREATE else "Edit Student Record"

    @property
    def description(self) -> str:
        if self.mode == FormMode.CREATE:
            return "Fill in the form below to add a new student record"
        return "Update the student information below"

    def edit(self, student: StudentRecord) -> None:
        self.bind(student.id)
        self.values = student.to_payload().model_dump(by_alias=True)

    def bind(self, student_id: int) -> None:
        """Switch to edit mode for ``student_id`` without loading its values."""
        self.student_id = student_id
        self.errors = {}
        self.notification = None

    def reset(self) -> None:
        self.student_id = None
        self.values = dict(EMPTY_FORM_VALUES)
        self.errors = {}
        self.notification = None

    def update_field(self, name: str, value: Any) -> None:
        if name not in EMPTY_FORM_VALUES:
            raise ValueError(f"Unknown form field '{name}'")
        self.values[name] = value

    async def submit(self, values: Optional[Mapping[str, Any]] = None) -> FormResult:
        """Validate the form and write it to the store."""
        for name, value in (values or {}).items():
            if name in EMPTY_FORM_VALUES:
                self.values[name] = value
        self.notification = None

        try:
            payload = validate_student(self.values)
        except FieldValidationError as e:
            self.errors = e.errors
            return FormResult(success=False, errors=e.errors)

        self.errors = {}
        self.is_submitting = True
        try:
            if self.mode == FormMode.EDIT:
                record = await self.store.update(self.student_id, payload)
            else:
                record = await self.store.create(payload)
        except StoreError as e:
            logger.error(f"Saving student failed ({self.mode.value}): {e.message}")
            self.notification = Notification.destructive(
                "Error!", "Something went wrong while saving."
            )
            return FormResult(success=False, notification=self.notification, error=e)
        finally:
            self.is_submitting = False

        if self.mode == FormMode.EDIT:
            self.values = record.to_payload().model_dump(by_alias=True)
            self.notification = Notification.info(
                "Updated!", "Student record has been updated successfully."
            )
        else:
            self.values = dict(EMPTY_FORM_VALUES)
            self.notification = Notification.info(
                "Success!", "Student record has been added successfully."
            )

        return FormResult(success=True, record=record, notification=self.notification)
