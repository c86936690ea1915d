"""Service layer for stars."""

from __future__ import annotations

import logging
from typing import List, Optional

from stellar_api.app.core.catalog import STARS, find_by_name
from stellar_api.app.schemas.star import Star

logger = logging.getLogger(__name__)


class StarService:
    """Service class for reading stars."""

    @classmethod
    async def list_stars(cls) -> List[Star]:
        return list(STARS)

    @classmethod
    async def get_star(cls, name: str) -> Optional[Star]:
        """Retrieve a star by name, ignoring case, or ``None``."""
        star = find_by_name(STARS, name)
        logger.debug("Star lookup %r -> %s", name, star.name if star else None)
        return star
