"""REST API for Roster."""

from roster.api.app import app, create_app
from roster.api.models import (
    APIResponse,
    GradeUpdate,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
)

__all__ = [
    "APIResponse",
    "GradeUpdate",
    "StudentCreate",
    "StudentResponse",
    "StudentUpdate",
    "app",
    "create_app",
]
