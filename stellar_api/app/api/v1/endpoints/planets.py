"""
Planet endpoints for API v1.

These routes expose the planet catalog read‑only.  Planet names are
matched case‑insensitively; the distance from the star is reported in
kilometres.
"""

from typing import List

from fastapi import APIRouter

from stellar_api.app.core.errors import NotFoundError
from stellar_api.app.schemas.planet import Planet
from stellar_api.app.schemas.problem import ProblemDetails
from stellar_api.app.services.planet_service import PlanetService

router = APIRouter()


@router.get("", response_model=List[Planet])
async def list_planets() -> List[Planet]:
    """Return all planets ordered by distance from the Sun."""
    return await PlanetService.list_planets()


@router.get(
    "/{name}",
    response_model=Planet,
    responses={404: {"model": ProblemDetails, "description": "Planet not found"}},
)
async def get_planet(name: str) -> Planet:
    """Retrieve a single planet by name.

    Raises ``NotFoundError`` (rendered as HTTP 404) if the planet is
    not in the catalog.
    """
    planet = await PlanetService.get_planet(name)
    if planet is None:
        raise NotFoundError("Planet not found.")
    return planet
