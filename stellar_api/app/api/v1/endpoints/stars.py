"""
Star endpoints for API v1.

These routes expose the star catalog read‑only: the full list and a
lookup by name.  Names are matched case‑insensitively, so
``/stars/sun`` and ``/stars/SUN`` both return the Sun.
"""

from typing import List

from fastapi import APIRouter

from stellar_api.app.core.errors import NotFoundError
from stellar_api.app.schemas.problem import ProblemDetails
from stellar_api.app.schemas.star import Star
from stellar_api.app.services.star_service import StarService

router = APIRouter()


@router.get("", response_model=List[Star])
async def list_stars() -> List[Star]:
    """Return all stars in catalog order."""
    return await StarService.list_stars()


@router.get(
    "/{name}",
    response_model=Star,
    responses={404: {"model": ProblemDetails, "description": "Star not found"}},
)
async def get_star(name: str) -> Star:
    """Retrieve a single star by name.

    Returns a problem details body with HTTP 404 if no star has the
    given name.
    """
    star = await StarService.get_star(name)
    if star is None:
        raise NotFoundError("Star not found.")
    return star
