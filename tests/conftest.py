"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from roster.registry import StudentRegistry, StudentStore


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


class FakeClock:
    """Deterministic clock advancing a fixed step on every read."""

    def __init__(self, start: int = 1_000, step: int = 10) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        return current


class SequentialIds:
    """Id factory yielding student-0001, student-0002, ..."""

    def __init__(self) -> None:
        self.issued = 0

    def __call__(self) -> str:
        self.issued += 1
        return f"student-{self.issued:04d}"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> Iterator[StudentStore]:
    """Create an in-memory StudentStore."""
    s = StudentStore(":memory:")
    yield s
    s.close()


@pytest.fixture
def registry(store: StudentStore, clock: FakeClock) -> StudentRegistry:
    """Create a registry with a fake clock, sequential ids and a fixed principal."""
    return StudentRegistry(
        store,
        clock=clock,
        id_factory=SequentialIds(),
        identity=lambda: "lecturer-principal",
    )
