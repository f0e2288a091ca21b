"""
Delivery endpoints
==================

POST /api/v1/deliveries/rank     -- delivery sequence, nearest customer first
POST /api/v1/deliveries/distance -- great-circle distance between two points

Both handlers are plain ``def``: the location lookup is a blocking HTTP
call, so FastAPI runs them in its threadpool.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from valet_delivery.api.dependencies import get_locator, get_ranker
from valet_delivery.api.middleware import RATE_LIMIT, limiter
from valet_delivery.api.schemas import (
    DistanceRequest,
    DistanceResponse,
    ErrorResponse,
    PointSchema,
    ProximityEntryResponse,
    RankRequest,
    RankResponse,
)
from valet_delivery.domain.distance import distance_between
from valet_delivery.domain.errors import LocationResolutionError
from valet_delivery.domain.ranking import ProximityRanker
from valet_delivery.infrastructure.locator import CourierLocator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/deliveries", tags=["deliveries"])


@router.post(
    "/rank",
    response_model=RankResponse,
    summary="Rank customers by proximity to the valet",
    responses={502: {"model": ErrorResponse, "description": "Valet location unavailable."}},
)
@limiter.limit(RATE_LIMIT)
def rank_deliveries(
    request: Request,
    body: RankRequest,
    ranker: ProximityRanker = Depends(get_ranker),
    locator: CourierLocator = Depends(get_locator),
):
    if body.reference is not None:
        reference = body.reference.to_domain()
    else:
        try:
            reference = locator.locate()
        except LocationResolutionError as e:
            logger.warning("Valet location unavailable: %s", e)
            raise HTTPException(status_code=502, detail=str(e))

    entries = ranker.rank(
        reference, [c.to_named_point() for c in body.customers]
    )
    return RankResponse(
        reference=PointSchema(
            latitude=reference.latitude, longitude=reference.longitude
        ),
        entries=[ProximityEntryResponse.model_validate(e) for e in entries],
    )


@router.post(
    "/distance",
    response_model=DistanceResponse,
    summary="Great-circle distance between two points",
)
@limiter.limit(RATE_LIMIT)
def distance(request: Request, body: DistanceRequest):
    return DistanceResponse(
        distance_km=distance_between(
            body.point_a.to_domain(), body.point_b.to_domain()
        )
    )
