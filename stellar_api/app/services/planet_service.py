"""
Service layer for planets.

Planets are read from the in‑memory catalog.  There are no write
operations; the service only lists the catalog and looks planets up
by name.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from stellar_api.app.core.catalog import PLANETS, find_by_name
from stellar_api.app.schemas.planet import Planet

logger = logging.getLogger(__name__)


class PlanetService:
    """Service class for reading planets."""

    @classmethod
    async def list_planets(cls) -> List[Planet]:
        """Return every planet in catalog order."""
        return list(PLANETS)

    @classmethod
    async def get_planet(cls, name: str) -> Optional[Planet]:
        """Retrieve a planet by name, ignoring case.

        Returns ``None`` when no planet has that name.
        """
        planet = find_by_name(PLANETS, name)
        logger.debug("Planet lookup %r -> %s", name, planet.name if planet else None)
        return planet
