"""StudentStore - durable key-ordered map of student id to Student."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import Engine, create_engine, event, func, select, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from roster.registry.models import Base, Student, StudentRow

MEMORY = ":memory:"


def _create_engine(db_path: str) -> Engine:
    if db_path == MEMORY:
        # One shared connection so every session, including those opened from
        # TestClient worker threads, sees the same in-memory database
        engine = create_engine(
            "sqlite:///:memory:",
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            f"sqlite:///{db_path}",
            connect_args={"check_same_thread": False},
        )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection: object, _connection_record: object) -> None:
        cursor = dbapi_connection.cursor()  # type: ignore[attr-defined]
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


class StudentStore:
    """Ordered durable map from student id to Student.

    Backed by a single SQLite ``students`` table. Each point operation runs in
    its own session; writes commit before returning.
    """

    def __init__(self, db_path: str = "roster.db") -> None:
        """Open the store, creating the database file and table if needed.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for an in-memory store.
        """
        self.db_path = db_path
        self.engine = _create_engine(db_path)
        self._sessions: sessionmaker[Session] = sessionmaker(
            bind=self.engine, expire_on_commit=False
        )
        Base.metadata.create_all(self.engine)

    def close(self) -> None:
        """Dispose of the engine and its connections."""
        self.engine.dispose()

    def journal_mode(self) -> str:
        """Report the SQLite journal mode ("wal" for file-backed stores)."""
        with self.engine.connect() as conn:
            return str(conn.execute(text("PRAGMA journal_mode")).scalar())

    def get(self, student_id: str) -> Student | None:
        """Look up a student by id.

        Returns:
            The stored Student, or None if no record exists for the id
        """
        with self._sessions() as session:
            row = session.get(StudentRow, student_id)
            return row.to_student() if row is not None else None

    def insert(self, student: Student) -> None:
        """Insert or overwrite the record keyed by ``student.id``."""
        with self._sessions.begin() as session:
            session.merge(StudentRow.from_student(student))

    def remove(self, student_id: str) -> Student | None:
        """Remove the record keyed by ``student_id``.

        Returns:
            The removed Student, or None if no record existed
        """
        with self._sessions.begin() as session:
            row = session.get(StudentRow, student_id)
            if row is None:
                return None
            session.delete(row)
            return row.to_student()

    def values(self) -> list[Student]:
        """List every stored record, ordered by id."""
        with self._sessions() as session:
            stmt = select(StudentRow).order_by(StudentRow.id)
            return [row.to_student() for row in session.execute(stmt).scalars()]

    def __len__(self) -> int:
        with self._sessions() as session:
            return session.execute(select(func.count()).select_from(StudentRow)).scalar_one()
