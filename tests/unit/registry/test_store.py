"""Unit tests for StudentStore map operations."""

import pytest

from roster.registry import MAX_UINT64, Student, StudentStore


def _student(student_id: str, cgpa: int = 5, updated_at: int | None = None) -> Student:
    return Student(
        id=student_id,
        name=f"name-{student_id}",
        course="accounting",
        level=1,
        cgpa=cgpa,
        created_at=10,
        lecturer_id="principal",
        updated_at=updated_at,
    )


@pytest.mark.unit
class TestStudentStore:
    """Tests for get/insert/remove/values."""

    def test_get_missing_returns_none(self, store: StudentStore) -> None:
        assert store.get("missing") is None

    def test_insert_then_get(self, store: StudentStore) -> None:
        student = _student("a")

        store.insert(student)

        assert store.get("a") == student

    def test_insert_overwrites(self, store: StudentStore) -> None:
        original = _student("a", cgpa=5)
        replacement = _student("a", cgpa=8, updated_at=20)
        store.insert(original)

        store.insert(replacement)

        assert store.get("a") == replacement
        assert len(store) == 1

    def test_remove_returns_removed(self, store: StudentStore) -> None:
        student = _student("a")
        store.insert(student)

        assert store.remove("a") == student
        assert store.get("a") is None

    def test_remove_missing_returns_none(self, store: StudentStore) -> None:
        assert store.remove("missing") is None

    def test_values_in_key_order(self, store: StudentStore) -> None:
        for student_id in ["c", "a", "b"]:
            store.insert(_student(student_id))

        assert [s.id for s in store.values()] == ["a", "b", "c"]

    def test_values_empty(self, store: StudentStore) -> None:
        assert store.values() == []
        assert len(store) == 0

    def test_large_timestamps_preserved(self, store: StudentStore) -> None:
        """Nanosecond timestamps survive storage."""
        student = _student("a", updated_at=1_700_000_000_123_456_789)
        store.insert(student)

        assert store.get("a") == student

    @pytest.mark.parametrize("value", [2**63 - 1, 2**63, MAX_UINT64])
    def test_unsigned_64_bit_values_preserved(self, store: StudentStore, value: int) -> None:
        """level, cgpa and timestamps hold the full unsigned 64-bit range."""
        student = Student(
            id="a",
            name="Ada",
            course="medicine",
            level=value,
            cgpa=value,
            created_at=value,
            lecturer_id="principal",
            updated_at=value,
        )
        store.insert(student)

        assert store.get("a") == student
        assert store.values() == [student]
