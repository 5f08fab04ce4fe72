"""Unit tests for Student Registry models."""

import pytest

from roster.registry.models import (
    CourseType,
    GradePayload,
    Student,
    StudentPayload,
    StudentRow,
    is_valid_course,
    merge_grade,
    merge_payload,
)


@pytest.fixture
def student() -> Student:
    return Student(
        id="s-1",
        name="Ada",
        course="Medicine",
        level=2,
        cgpa=9,
        created_at=100,
        lecturer_id="principal-a",
    )


class TestCourseType:
    """Tests for CourseType enum."""

    def test_course_type_values(self) -> None:
        """All five courses exist in canonical order."""
        assert [c.value for c in CourseType] == [
            "accounting",
            "information tech",
            "medicine",
            "engineer",
            "farming",
        ]

    @pytest.mark.parametrize("course", ["MEDICINE", "Information Tech", "farming"])
    def test_is_valid_course_ignores_case(self, course: str) -> None:
        assert is_valid_course(course)

    @pytest.mark.parametrize("course", ["astronomy", "", "informationtech", " medicine"])
    def test_is_valid_course_rejects_unknown(self, course: str) -> None:
        assert not is_valid_course(course)


class TestStudent:
    """Tests for the Student value."""

    def test_updated_at_defaults_to_none(self, student: Student) -> None:
        """A fresh record has never been updated."""
        assert student.updated_at is None

    def test_zero_updated_at_distinct_from_absent(self, student: Student) -> None:
        """A zero timestamp is a real value, not 'never updated'."""
        updated = merge_grade(student, GradePayload(cgpa=1), updated_at=0)
        assert updated.updated_at == 0
        assert updated != student

    def test_student_is_immutable(self, student: Student) -> None:
        with pytest.raises(AttributeError):
            student.cgpa = 3  # type: ignore[misc]

    def test_to_dict(self, student: Student) -> None:
        assert student.to_dict() == {
            "id": "s-1",
            "name": "Ada",
            "course": "Medicine",
            "level": 2,
            "cgpa": 9,
            "created_at": 100,
            "updated_at": None,
            "lecturer_id": "principal-a",
        }


class TestMerge:
    """Tests for the payload merge functions."""

    def test_merge_payload_replaces_mutable_fields(self, student: Student) -> None:
        merged = merge_payload(
            student, StudentPayload(name="Bo", course="farming", level=4, cgpa=2), updated_at=200
        )

        assert (merged.name, merged.course, merged.level, merged.cgpa) == ("Bo", "farming", 4, 2)
        assert merged.updated_at == 200

    def test_merge_payload_keeps_identity_fields(self, student: Student) -> None:
        merged = merge_payload(
            student, StudentPayload(name="Bo", course="farming", level=4, cgpa=2), updated_at=200
        )

        assert merged.id == student.id
        assert merged.created_at == student.created_at
        assert merged.lecturer_id == student.lecturer_id

    def test_merge_payload_empty_course_keeps_stored(self, student: Student) -> None:
        merged = merge_payload(
            student, StudentPayload(name="Ada", course="", level=2, cgpa=9), updated_at=200
        )

        assert merged.course == "Medicine"

    def test_merge_grade_changes_only_cgpa(self, student: Student) -> None:
        merged = merge_grade(student, GradePayload(cgpa=3), updated_at=300)

        assert merged.cgpa == 3
        assert merged.updated_at == 300
        assert merged.name == student.name
        assert merged.course == student.course
        assert merged.level == student.level


class TestStudentRow:
    """Tests for the StudentRow table model."""

    def test_row_round_trips_student(self, student: Student) -> None:
        assert StudentRow.from_student(student).to_student() == student

    def test_row_repr(self, student: Student) -> None:
        repr_str = repr(StudentRow.from_student(student))
        assert "s-1" in repr_str
        assert "Ada" in repr_str
