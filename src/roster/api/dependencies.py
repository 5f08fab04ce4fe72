"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, Request

from roster.registry import StudentRegistry


def get_registry(request: Request) -> StudentRegistry:
    """Dependency that provides the StudentRegistry owned by the app."""
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise RuntimeError("StudentRegistry not initialized. Start the app lifespan first.")
    return registry


# Type alias for dependency injection
RegistryDep = Annotated[StudentRegistry, Depends(get_registry)]


def get_caller(x_principal: Annotated[str | None, Header()] = None) -> str | None:
    """Dependency that reads the calling principal from the ``X-Principal`` header.

    Returns None when the header is absent so the registry's identity provider applies.
    """
    return x_principal or None


CallerDep = Annotated[str | None, Depends(get_caller)]
