"""StudentRegistry - validation and mutation logic over the Student Store."""

from __future__ import annotations

import time
import uuid
from collections.abc import Callable

from roster.logging import describe_student, get_logger, log_rejection
from roster.registry.exceptions import CourseDoesNotExistError, UserDoesNotExistError
from roster.registry.models import (
    CourseType,
    GradePayload,
    Student,
    StudentPayload,
    is_valid_course,
    merge_grade,
    merge_payload,
)
from roster.registry.store import StudentStore

logger = get_logger("registry")

# Principal recorded when no caller identity is available
ANONYMOUS_PRINCIPAL = "2vxsx-fae"


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid.uuid4())


def _course_error(course: str) -> CourseDoesNotExistError:
    allowed = ",".join(c.value for c in CourseType)
    return CourseDoesNotExistError(
        f"'{course}' is not a viable course, please select one of: {allowed}"
    )


class StudentRegistry:
    """Main API for Student Registry operations.

    Owns the store it is given and mediates all access to it. Clock, id
    generation and caller identity are injected so callers control them.

    Only course membership and record existence are checked here; those are the
    only failures callers see (CourseDoesNotExist, UserDoesNotExist). Field
    shape (non-empty name, level and cgpa within 0..MAX_UINT64) is enforced by
    the transports, and the store persists any Python int without overflow.
    """

    def __init__(
        self,
        store: StudentStore,
        clock: Callable[[], int] = time.time_ns,
        id_factory: Callable[[], str] = generate_uuid,
        identity: Callable[[], str] = lambda: ANONYMOUS_PRINCIPAL,
    ) -> None:
        """Initialize the registry.

        Args:
            store: The Student Store to read and write
            clock: Returns the current time in nanoseconds since the epoch
            id_factory: Returns a globally unique student id
            identity: Returns the principal used when a call names no caller
        """
        self._store = store
        self._clock = clock
        self._id_factory = id_factory
        self._identity = identity

    def close(self) -> None:
        """Close the underlying store."""
        self._store.close()

    def list_courses(self) -> list[str]:
        """List the course-type set in canonical order."""
        return [c.value for c in CourseType]

    def create_student(
        self,
        name: str,
        course: str,
        level: int,
        cgpa: int,
        caller: str | None = None,
    ) -> Student:
        """Create a new student record.

        Args:
            name: Display name
            course: Course name, matched case-insensitively and stored as given
            level: Academic level/year
            cgpa: Grade-point value
            caller: Creating principal; defaults to the identity provider

        Returns:
            The stored Student with generated id

        Raises:
            CourseDoesNotExistError: If course is not in the course-type set
        """
        if not is_valid_course(course):
            raise log_rejection(logger, "create_student", _course_error(course))

        student = Student(
            id=self._id_factory(),
            name=name,
            course=course,
            level=level,
            cgpa=cgpa,
            created_at=self._clock(),
            lecturer_id=caller if caller is not None else self._identity(),
        )
        self._store.insert(student)
        logger.info("Created student %s", describe_student(student))
        return student

    def get_all_students(self) -> list[Student]:
        """Return every stored student in key order.

        Raises:
            UserDoesNotExistError: If the store is empty
        """
        students = self._store.values()
        if not students:
            raise log_rejection(
                logger, "get_all_students", UserDoesNotExistError("No students found")
            )
        return students

    def get_student_by_id(self, student_id: str) -> Student:
        """Get a student by id.

        Raises:
            UserDoesNotExistError: If no record exists; the message is the id
        """
        student = self._store.get(student_id)
        if student is None:
            raise log_rejection(logger, "get_student_by_id", UserDoesNotExistError(student_id))
        return student

    def update_student(self, student_id: str, payload: StudentPayload) -> Student:
        """Replace a student's name, course, level and cgpa.

        An empty ``payload.course`` keeps the stored course.

        Raises:
            UserDoesNotExistError: If no record exists for the id
            CourseDoesNotExistError: If a non-empty course is not valid
        """
        student = self._store.get(student_id)
        if student is None:
            raise log_rejection(
                logger,
                "update_student",
                UserDoesNotExistError(
                    f"couldn't update a student with id={student_id}. Student not found"
                ),
            )
        if payload.course and not is_valid_course(payload.course):
            raise log_rejection(logger, "update_student", _course_error(payload.course))

        updated = merge_payload(student, payload, self._stamp(student))
        self._store.insert(updated)
        logger.info("Updated student %s", describe_student(updated))
        return updated

    def update_grade(self, student_id: str, payload: GradePayload) -> Student:
        """Replace only a student's cgpa.

        Raises:
            UserDoesNotExistError: If no record exists for the id
        """
        student = self._store.get(student_id)
        if student is None:
            raise log_rejection(
                logger,
                "update_grade",
                UserDoesNotExistError(
                    f"couldn't update grade for a student with id={student_id}. Student not found"
                ),
            )

        updated = merge_grade(student, payload, self._stamp(student))
        self._store.insert(updated)
        logger.info(
            "Updated grade for student %s: %d -> %d", student_id, student.cgpa, updated.cgpa
        )
        return updated

    def delete_student_record(self, student_id: str) -> Student:
        """Delete a student record.

        Returns:
            The record as it was just before removal

        Raises:
            UserDoesNotExistError: If no record exists for the id
        """
        removed = self._store.remove(student_id)
        if removed is None:
            raise log_rejection(
                logger,
                "delete_student_record",
                UserDoesNotExistError(
                    f"couldn't delete a student with id={student_id}. Student not found"
                ),
            )
        logger.info("Deleted student %s", describe_student(removed))
        return removed

    def get_top_students(self, count: int) -> list[Student]:
        """Return the ``count`` students with the highest cgpa, highest first.

        Ties keep key order, so results are reproducible for a fixed store.

        Raises:
            UserDoesNotExistError: If the result is empty (empty store or count 0)
        """
        ranked = sorted(self._store.values(), key=lambda s: s.cgpa, reverse=True)
        top = ranked[: max(count, 0)]
        if not top:
            raise log_rejection(
                logger,
                "get_top_students",
                UserDoesNotExistError("No top-performing students found"),
            )
        return top

    def _stamp(self, student: Student) -> int:
        # updated_at never precedes the record's last timestamp
        last = student.updated_at if student.updated_at is not None else student.created_at
        return max(self._clock(), last)
