"""
Domain value objects.

All three types are frozen dataclasses: a point, a named point (customer
or valet) and a ranked entry never change once built, so they can be
shared freely between the session, the ranker and the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass

from .distance import distance_between


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def distance_to(self, other: GeoPoint) -> float:
        """Great-circle distance to *other* in km."""
        return distance_between(self, other)


@dataclass(frozen=True)
class NamedPoint:
    """A customer (or the valet) and where they are."""

    name: str
    location: GeoPoint

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("NamedPoint name must be a non-empty string")


@dataclass(frozen=True)
class ProximityEntry:
    name: str
    distance_km: float
