"""Custom exceptions for the Student Registry."""


class RegistryError(Exception):
    """Base exception for Student Registry errors.

    Every registry error carries a ``kind`` naming it on the wire and the
    human-readable ``message`` that transports surface verbatim.
    """

    kind = "RegistryError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserDoesNotExistError(RegistryError):
    """Student with given ID does not exist, or a listing came back empty."""

    kind = "UserDoesNotExist"


class CourseDoesNotExistError(RegistryError):
    """Course is not a member of the course-type set."""

    kind = "CourseDoesNotExist"
