from sqlalchemy import String, Integer, Float, Text, CheckConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Student(Base):
    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)  # RFC 5321 max length
    phone: Mapped[str] = mapped_column(String(10), nullable=False)
    bio: Mapped[str] = mapped_column(Text, nullable=False)
    tenth_marks: Mapped[float] = mapped_column(Float, nullable=False)
    twelfth_marks: Mapped[float] = mapped_column(Float, nullable=False)
    degree_type: Mapped[str] = mapped_column(String(10), nullable=False)
    years_of_study: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint(
            "tenth_marks >= 0 AND tenth_marks <= 100", name="ck_students_tenth_marks"
        ),
        CheckConstraint(
            "twelfth_marks >= 0 AND twelfth_marks <= 100",
            name="ck_students_twelfth_marks",
        ),
        CheckConstraint(
            "years_of_study >= 1 AND years_of_study <= 10",
            name="ck_students_years_of_study",
        ),
    )

    def __repr__(self) -> str:
        return f"<Student {self.id} {self.first_name} {self.last_name}>"
