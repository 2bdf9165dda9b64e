import math
from dataclasses import dataclass, field
from typing import List, Sequence

from student_records.schemas.student_schemas import StudentRecord

PAGE_SIZE = 10


@dataclass(frozen=True)
class StudentPage:
    """One page of the filtered student list"""

    items: List[StudentRecord] = field(default_factory=list)
    page: int = 1
    page_size: int = PAGE_SIZE
    total: int = 0
    total_pages: int = 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def summary(self) -> str:
        return f"{self.total} student{'s' if self.total != 1 else ''} found"


def normalize_search(search_term: str) -> str:
    return (search_term or "").strip().lower()


def matches(student: StudentRecord, search_term: str) -> bool:
    """Case-insensitive substring match on full name, email, city and degree"""
    term = normalize_search(search_term)
    if not term:
        return True

    haystacks = (
        f"{student.first_name} {student.last_name}",
        student.email,
        student.city,
        student.degree_type.value,
    )
    return any(term in value.lower() for value in haystacks)


def clamp_page(page: int, total_pages: int) -> int:
    if total_pages <= 0:
        return 1
    return min(max(page, 1), total_pages)


def project(
    students: Sequence[StudentRecord],
    search_term: str = "",
    page: int = 1,
    page_size: int = PAGE_SIZE,
) -> StudentPage:
    """
    Filter ``students`` by ``search_term`` and cut out one page.

    Out-of-range pages clamp to the nearest valid page, so a non-empty match
    set never yields an empty page.
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1")

    matched = [student for student in students if matches(student, search_term)]
    total = len(matched)
    total_pages = math.ceil(total / page_size)
    current = clamp_page(page, total_pages)

    start = (current - 1) * page_size
    return StudentPage(
        items=matched[start : start + page_size],
        page=current,
        page_size=page_size,
        total=total,
        total_pages=total_pages,
    )
