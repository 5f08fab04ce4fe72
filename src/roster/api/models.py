"""Pydantic models for REST API."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from roster.registry.models import MAX_UINT64

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper.

    On failure ``error`` carries the registry message verbatim and ``kind``
    names the error (e.g. ``UserDoesNotExist``).
    """

    data: T | None = None
    error: str | None = None
    kind: str | None = None


# Student models


class StudentCreate(BaseModel):
    """Request model for creating a student."""

    name: str = Field(..., min_length=1, max_length=255)
    course: str = Field(..., max_length=64)
    level: int = Field(..., ge=0, le=MAX_UINT64)
    cgpa: int = Field(..., ge=0, le=MAX_UINT64)


class StudentUpdate(BaseModel):
    """Request model for a full student update. An empty course keeps the stored one."""

    name: str = Field(..., min_length=1, max_length=255)
    course: str = Field(default="", max_length=64)
    level: int = Field(..., ge=0, le=MAX_UINT64)
    cgpa: int = Field(..., ge=0, le=MAX_UINT64)


class GradeUpdate(BaseModel):
    """Request model for a grade-only update."""

    cgpa: int = Field(..., ge=0, le=MAX_UINT64)


class StudentResponse(BaseModel):
    """Response model for a student."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    course: str
    level: int
    cgpa: int
    created_at: int
    updated_at: int | None
    lecturer_id: str


def student_to_response(student: Any) -> StudentResponse:
    """Convert a Student to StudentResponse."""
    return StudentResponse.model_validate(student)
