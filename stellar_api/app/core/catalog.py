"""
In‑memory catalog of planets and stars.

The catalog replaces a database for this service: two tuples of
frozen records built once at import time and shared by every request.
Nothing writes to them, so concurrent requests read them without any
locking.

``find_by_name`` is the single lookup used by the services.  It scans
the records in order and compares names case‑insensitively, returning
the first match.
"""

from typing import Optional, Sequence, Tuple, TypeVar, Union

from stellar_api.app.schemas.planet import Planet
from stellar_api.app.schemas.star import Star

Record = TypeVar("Record", bound=Union[Planet, Star])


PLANETS: Tuple[Planet, ...] = (
    Planet(name="Mercury", distance_from_star=57_910_000),
    Planet(name="Venus", distance_from_star=108_200_000),
    Planet(name="Earth", distance_from_star=149_600_000),
    Planet(name="Mars", distance_from_star=227_900_000),
    Planet(name="Jupiter", distance_from_star=778_500_000),
    Planet(name="Saturn", distance_from_star=1_434_000_000),
    Planet(name="Uranus", distance_from_star=2_871_000_000),
    Planet(name="Neptune", distance_from_star=4_495_000_000),
)

STARS: Tuple[Star, ...] = (
    Star(name="Sun", solar_masses=1),
    Star(name="Proxima Centauri", solar_masses=0.122),
    Star(name="Rigil Kentaurus", solar_masses=1),
    Star(name="Toliman", solar_masses=0.77),
    Star(name="Barnard's Star", solar_masses=0.13),
    Star(name="Polaris", solar_masses=6.5),
)


def find_by_name(records: Sequence[Record], name: str) -> Optional[Record]:
    """Return the first record whose name equals ``name`` ignoring case."""
    wanted = name.casefold()
    for record in records:
        if record.name.casefold() == wanted:
            return record
    return None
