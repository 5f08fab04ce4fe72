"""Student CRUD and ranking endpoints."""

from fastapi import APIRouter, Query, status

from roster.api.dependencies import CallerDep, RegistryDep
from roster.api.models import (
    APIResponse,
    GradeUpdate,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
    student_to_response,
)
from roster.registry import MAX_UINT64, GradePayload, StudentPayload

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=APIResponse[list[StudentResponse]])
def list_students(registry: RegistryDep) -> APIResponse[list[StudentResponse]]:
    """List all students."""
    students = registry.get_all_students()
    return APIResponse(data=[student_to_response(s) for s in students])


@router.post(
    "",
    response_model=APIResponse[StudentResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_student(
    student: StudentCreate, registry: RegistryDep, caller: CallerDep
) -> APIResponse[StudentResponse]:
    """Create a new student."""
    created = registry.create_student(
        name=student.name,
        course=student.course,
        level=student.level,
        cgpa=student.cgpa,
        caller=caller,
    )
    return APIResponse(data=student_to_response(created))


# Declared before /{student_id} so "top" is not captured as an id
@router.get("/top", response_model=APIResponse[list[StudentResponse]])
def top_students(
    registry: RegistryDep,
    count: int = Query(..., ge=0, le=MAX_UINT64, description="Number of students to return"),
) -> APIResponse[list[StudentResponse]]:
    """List the top students by cgpa, highest first."""
    students = registry.get_top_students(count)
    return APIResponse(data=[student_to_response(s) for s in students])


@router.get("/{student_id}", response_model=APIResponse[StudentResponse])
def get_student(student_id: str, registry: RegistryDep) -> APIResponse[StudentResponse]:
    """Get a student by ID."""
    student = registry.get_student_by_id(student_id)
    return APIResponse(data=student_to_response(student))


@router.put("/{student_id}", response_model=APIResponse[StudentResponse])
def update_student(
    student_id: str, student: StudentUpdate, registry: RegistryDep
) -> APIResponse[StudentResponse]:
    """Replace a student's name, course, level and cgpa."""
    updated = registry.update_student(
        student_id,
        StudentPayload(
            name=student.name,
            course=student.course,
            level=student.level,
            cgpa=student.cgpa,
        ),
    )
    return APIResponse(data=student_to_response(updated))


@router.patch("/{student_id}/grade", response_model=APIResponse[StudentResponse])
def update_grade(
    student_id: str, grade: GradeUpdate, registry: RegistryDep
) -> APIResponse[StudentResponse]:
    """Update only a student's cgpa."""
    updated = registry.update_grade(student_id, GradePayload(cgpa=grade.cgpa))
    return APIResponse(data=student_to_response(updated))


@router.delete("/{student_id}", response_model=APIResponse[StudentResponse])
def delete_student(student_id: str, registry: RegistryDep) -> APIResponse[StudentResponse]:
    """Delete a student and return the removed record."""
    removed = registry.delete_student_record(student_id)
    return APIResponse(data=student_to_response(removed))
