"""
Top‑level router for version 1 of the API.

This router aggregates the star and planet routers under their
collection prefixes.  The routes are mounted at the application root,
so ``GET /stars`` and ``GET /planets/{name}`` are served directly.
"""

from fastapi import APIRouter

from .endpoints import planets, stars

router = APIRouter()

router.include_router(stars.router, prefix="/stars", tags=["stars"])
router.include_router(planets.router, prefix="/planets", tags=["planets"])
