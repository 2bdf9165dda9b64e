from enum import Enum
from typing import Any, List

from pydantic import EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from student_records.schemas.camel_base_model import CamelCaseBaseModel as BaseModel


class DegreeType(str, Enum):
    BSC = "BSc"
    BTECH = "BTech"
    BA = "BA"
    BBA = "BBA"
    BCA = "BCA"
    BCOM = "BCom"
    MSC = "MSc"
    MTECH = "MTech"
    MA = "MA"
    MBA = "MBA"
    MCA = "MCA"
    MCOM = "MCom"


DEGREE_LABELS = {
    DegreeType.BSC: "Bachelor of Science (BSc)",
    DegreeType.BTECH: "Bachelor of Technology (BTech)",
    DegreeType.BA: "Bachelor of Arts (BA)",
    DegreeType.BBA: "Bachelor of Business Administration (BBA)",
    DegreeType.BCA: "Bachelor of Computer Applications (BCA)",
    DegreeType.BCOM: "Bachelor of Commerce (BCom)",
    DegreeType.MSC: "Master of Science (MSc)",
    DegreeType.MTECH: "Master of Technology (MTech)",
    DegreeType.MA: "Master of Arts (MA)",
    DegreeType.MBA: "Master of Business Administration (MBA)",
    DegreeType.MCA: "Master of Computer Applications (MCA)",
    DegreeType.MCOM: "Master of Commerce (MCom)",
}


class StudentPayload(BaseModel):
    """Student profile fields as submitted by the form, without an identifier"""

    first_name: str = Field(..., min_length=2, description="First name")
    last_name: str = Field(..., min_length=2, description="Last name")
    city: str = Field(..., min_length=2, description="City of residence")
    email: EmailStr = Field(..., description="Email address")
    phone: str = Field(
        ..., pattern=r"^[0-9]{10}$", description="10-digit phone number"
    )
    bio: str = Field(..., min_length=10, max_length=500, description="Short bio")
    tenth_marks: float = Field(..., ge=0, le=100, description="10th marks (%)")
    twelfth_marks: float = Field(..., ge=0, le=100, description="12th marks (%)")
    degree_type: DegreeType = Field(..., description="Degree code")
    years_of_study: int = Field(..., ge=1, le=10, description="Years of study")

    @field_validator("first_name", "last_name", "city", "email", "bio", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        """Trim free-text fields; phone is matched as entered"""
        return v.strip() if isinstance(v, str) else v

    @field_validator("tenth_marks", "twelfth_marks", mode="before")
    @classmethod
    def reject_boolean_marks(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise PydanticCustomError("float_type", "Input should be a valid number")
        return v

    @field_validator("years_of_study", mode="before")
    @classmethod
    def reject_boolean_years(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise PydanticCustomError("int_type", "Input should be a valid integer")
        return v


class StudentRecord(StudentPayload):
    """A stored student record"""

    id: int = Field(..., description="Student ID assigned by the store")

    def to_payload(self) -> StudentPayload:
        return StudentPayload.model_validate(self.model_dump(exclude={"id"}))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class DegreeOption(BaseModel):
    value: DegreeType
    label: str


def degree_options() -> List[DegreeOption]:
    return [DegreeOption(value=code, label=label) for code, label in DEGREE_LABELS.items()]
