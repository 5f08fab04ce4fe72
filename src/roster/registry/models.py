"""Data model for the Student Registry."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

from sqlalchemy import String
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator

# Largest value of an unsigned 64-bit field (level, cgpa, timestamps)
MAX_UINT64 = 2**64 - 1


class CourseType(StrEnum):
    """Course-type set. Declaration order is the canonical listing order."""

    ACCOUNTING = "accounting"
    INFORMATION_TECH = "information tech"
    MEDICINE = "medicine"
    ENGINEER = "engineer"
    FARMING = "farming"


def is_valid_course(course: str) -> bool:
    """Check a course name against the course-type set, ignoring case."""
    return course.lower() in {c.value for c in CourseType}


@dataclass(frozen=True)
class Student:
    """A single student record as returned by the registry."""

    id: str
    name: str
    course: str
    level: int
    cgpa: int
    created_at: int
    lecturer_id: str
    updated_at: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "course": self.course,
            "level": self.level,
            "cgpa": self.cgpa,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "lecturer_id": self.lecturer_id,
        }


@dataclass(frozen=True)
class StudentPayload:
    """Full replacement payload for a student update."""

    name: str
    course: str
    level: int
    cgpa: int


@dataclass(frozen=True)
class GradePayload:
    """Payload for a grade-only update."""

    cgpa: int


def merge_payload(student: Student, payload: StudentPayload, updated_at: int) -> Student:
    """Overlay an update payload onto a stored student.

    ``id``, ``created_at`` and ``lecturer_id`` are never replaced. ``name``,
    ``level`` and ``cgpa`` are always replaced. ``course`` is replaced only
    when the payload carries a non-empty value. ``updated_at`` is always
    stamped.
    """
    return replace(
        student,
        name=payload.name,
        course=payload.course if payload.course else student.course,
        level=payload.level,
        cgpa=payload.cgpa,
        updated_at=updated_at,
    )


def merge_grade(student: Student, payload: GradePayload, updated_at: int) -> Student:
    """Overlay a grade payload onto a stored student. Only ``cgpa`` changes."""
    return replace(student, cgpa=payload.cgpa, updated_at=updated_at)


class UInt64(TypeDecorator[int]):
    """Unsigned 64-bit integer stored as decimal text.

    SQLite integers are signed 64-bit, so values at or above 2**63 would overflow
    a native INTEGER column.
    """

    impl = String(20)
    cache_ok = True

    def process_bind_param(self, value: int | None, dialect: Dialect) -> str | None:
        return None if value is None else str(int(value))

    def process_result_value(self, value: str | None, dialect: Dialect) -> int | None:
        return None if value is None else int(value)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class StudentRow(Base):
    """Student table row - persisted layout of a Student keyed by id."""

    __tablename__ = "students"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    course: Mapped[str] = mapped_column(String(64), nullable=False)
    level: Mapped[int] = mapped_column(UInt64, nullable=False)
    cgpa: Mapped[int] = mapped_column(UInt64, nullable=False)
    created_at: Mapped[int] = mapped_column(UInt64, nullable=False)
    updated_at: Mapped[int | None] = mapped_column(UInt64, nullable=True)
    lecturer_id: Mapped[str] = mapped_column(String(255), nullable=False)

    @classmethod
    def from_student(cls, student: Student) -> StudentRow:
        """Build a row from a Student value."""
        return cls(
            id=student.id,
            name=student.name,
            course=student.course,
            level=student.level,
            cgpa=student.cgpa,
            created_at=student.created_at,
            updated_at=student.updated_at,
            lecturer_id=student.lecturer_id,
        )

    def to_student(self) -> Student:
        """Convert the row back into a Student value."""
        return Student(
            id=self.id,
            name=self.name,
            course=self.course,
            level=self.level,
            cgpa=self.cgpa,
            created_at=self.created_at,
            updated_at=self.updated_at,
            lecturer_id=self.lecturer_id,
        )

    def __repr__(self) -> str:
        return f"<StudentRow(id={self.id!r}, name={self.name!r}, course={self.course!r})>"
