from enum import Enum

from pydantic import Field

from student_records.schemas.camel_base_model import CamelCaseBaseModel as BaseModel


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class Notification(BaseModel):
    """A toast-style message for the UI to show after an action"""

    title: str = Field(..., description="Short heading")
    description: str = Field(..., description="Message body")
    variant: NotificationVariant = Field(
        NotificationVariant.DEFAULT, description="Visual style"
    )

    @classmethod
    def info(cls, title: str, description: str) -> "Notification":
        return cls(title=title, description=description)

    @classmethod
    def destructive(cls, title: str, description: str) -> "Notification":
        return cls(
            title=title,
            description=description,
            variant=NotificationVariant.DESTRUCTIVE,
        )
