"""Student Registry - validated CRUD and ranked queries over student records."""

from roster.registry.exceptions import (
    CourseDoesNotExistError,
    RegistryError,
    UserDoesNotExistError,
)
from roster.registry.models import (
    MAX_UINT64,
    CourseType,
    GradePayload,
    Student,
    StudentPayload,
)
from roster.registry.registry import ANONYMOUS_PRINCIPAL, StudentRegistry
from roster.registry.store import StudentStore

__all__ = [
    "ANONYMOUS_PRINCIPAL",
    "MAX_UINT64",
    "CourseDoesNotExistError",
    "CourseType",
    "GradePayload",
    "RegistryError",
    "Student",
    "StudentPayload",
    "StudentRegistry",
    "StudentStore",
    "UserDoesNotExistError",
]
