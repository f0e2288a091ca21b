"""FastAPI dependency injection helpers."""

from typing import Iterator

from fastapi import Depends

from valet_delivery.config import Settings, get_settings
from valet_delivery.domain.ranking import ProximityRanker
from valet_delivery.infrastructure.locator import CourierLocator

_ranker = ProximityRanker()


def get_ranker() -> ProximityRanker:
    return _ranker


def get_locator(
    settings: Settings = Depends(get_settings),
) -> Iterator[CourierLocator]:
    """Yield a locator for one request.

    The HTTP client is only opened if the route actually asks for a lookup.
    """
    with CourierLocator(settings) as locator:
        yield locator
