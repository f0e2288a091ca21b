"""
Proximity Ranking
=================

Orders customers by great-circle distance from the valet.

Ordering rules
--------------
1. Ascending ``distance_km``.
2. Equal distances keep their input order (Python's sort is stable).
3. ``nan`` distances go after every real distance, again in input order.

The key ``(is_nan, distance)`` makes the comparison total, so the output
is fully deterministic for a given input sequence.

Complexity: O(N log N) for N customers.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from .entities import GeoPoint, NamedPoint, ProximityEntry

logger = logging.getLogger(__name__)


def _sort_key(entry: ProximityEntry) -> tuple[bool, float]:
    if math.isnan(entry.distance_km):
        return (True, 0.0)
    return (False, entry.distance_km)


class ProximityRanker:
    """Stateless; one instance can be shared across threads."""

    def rank(
        self, reference: GeoPoint, points: Iterable[NamedPoint]
    ) -> tuple[ProximityEntry, ...]:
        entries = [
            ProximityEntry(
                name=point.name,
                distance_km=reference.distance_to(point.location),
            )
            for point in points
        ]
        logger.debug("Ranking %d customer(s) from %s", len(entries), reference)
        return tuple(sorted(entries, key=_sort_key))


def rank_by_proximity(
    reference_point: GeoPoint, named_points: Iterable[NamedPoint]
) -> tuple[ProximityEntry, ...]:
    """Rank *named_points* by distance from *reference_point*, nearest first."""
    return ProximityRanker().rank(reference_point, named_points)
