"""Roster - a student record registry with ranked queries."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the installed Roster version."""
    return __version__
