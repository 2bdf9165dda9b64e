"""
Field-level validation for student records.

The rules live on ``StudentPayload`` as pydantic constraints. This module runs
them, collects every failing field at once and rewrites pydantic's messages
into the wording shown next to each form input.
"""

from typing import Any, Dict, Mapping

from pydantic import ValidationError

from student_records.schemas.student_schemas import StudentPayload
from student_records.utils.errors import FieldValidationError

MARKS_MESSAGES = {
    "greater_than_equal": "Marks cannot be negative",
    "less_than_equal": "Marks cannot exceed 100",
    "float_parsing": "Marks must be a number",
    "float_type": "Marks must be a number",
}

FIELD_MESSAGES: Dict[str, Dict[str, str]] = {
    "firstName": {
        "string_too_short": "First name must be at least 2 characters",
    },
    "lastName": {
        "string_too_short": "Last name must be at least 2 characters",
    },
    "city": {
        "string_too_short": "City must be at least 2 characters",
    },
    "email": {
        "value_error": "Please enter a valid email address",
    },
    "phone": {
        "string_pattern_mismatch": "Phone number must be exactly 10 digits",
    },
    "bio": {
        "string_too_short": "Bio must be at least 10 characters",
        "string_too_long": "Bio must not exceed 500 characters",
    },
    "tenthMarks": MARKS_MESSAGES,
    "twelfthMarks": MARKS_MESSAGES,
    "degreeType": {
        "enum": "Please select a valid degree type",
    },
    "yearsOfStudy": {
        "greater_than_equal": "Years of study must be at least 1",
        "less_than_equal": "Years of study cannot exceed 10",
        "int_parsing": "Years of study must be a whole number",
        "int_from_float": "Years of study must be a whole number",
        "int_type": "Years of study must be a whole number",
    },
}

FIELD_LABELS = {
    "firstName": "First name",
    "lastName": "Last name",
    "city": "City",
    "email": "Email",
    "phone": "Phone number",
    "bio": "Bio",
    "tenthMarks": "10th marks",
    "twelfthMarks": "12th marks",
    "degreeType": "Degree type",
    "yearsOfStudy": "Years of study",
}


def _message_for(field: str, error: Dict[str, Any]) -> str:
    error_type = error["type"]
    label = FIELD_LABELS.get(field, field)

    if error_type == "missing":
        return f"{label} is required"
    if field == "degreeType" and error.get("input") in ("", None):
        return "Please select a degree type"
    if error_type == "string_type":
        return f"{label} must be text"

    return FIELD_MESSAGES.get(field, {}).get(error_type, error["msg"])


def _translate(exc: ValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "record"
        # Keep the first message per field
        if field not in errors:
            errors[field] = _message_for(field, error)
    return errors


def validate_student(raw: Mapping[str, Any]) -> StudentPayload:
    """
    Validate a candidate student record.

    Every field rule is evaluated, so the raised error lists all violations.
    Numeric fields may arrive as text and are coerced.

    Raises:
        FieldValidationError: with a ``{field: message}`` map keyed by the
            camelCase field name.
    """
    if not isinstance(raw, Mapping):
        raise FieldValidationError({"record": "Student record must be an object"})

    # An incoming id never takes part in validation; the store owns identifiers
    candidate = {key: value for key, value in raw.items() if key != "id"}
    try:
        return StudentPayload.model_validate(candidate)
    except ValidationError as exc:
        raise FieldValidationError(_translate(exc)) from None


def collect_errors(raw: Mapping[str, Any]) -> Dict[str, str]:
    """Return the field error map for ``raw``; empty when the record is valid."""
    try:
        validate_student(raw)
    except FieldValidationError as exc:
        return exc.errors
    return {}
