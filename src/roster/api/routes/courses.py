"""Course-type listing endpoint."""

from fastapi import APIRouter

from roster.api.dependencies import RegistryDep
from roster.api.models import APIResponse

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=APIResponse[list[str]])
def list_courses(registry: RegistryDep) -> APIResponse[list[str]]:
    """List the valid course names."""
    return APIResponse(data=registry.list_courses())
