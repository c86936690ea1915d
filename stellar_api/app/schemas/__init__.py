"""
Pydantic schema definitions for API payloads.

Catalog records (planets, stars) and the problem‑details error body
each have their own module.  The JSON field names are camelCase while
the Python attributes stay snake_case.
"""

from .planet import Planet
from .star import Star
from .problem import ProblemDetails

__all__ = ["Planet", "Star", "ProblemDetails"]
