"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from valet_delivery.domain.entities import GeoPoint, NamedPoint


# ── Requests ──────────────────────────────────────────────────────────


class PointSchema(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    def to_domain(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)


class CustomerSchema(PointSchema):
    name: str = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be blank")
        return v

    def to_named_point(self) -> NamedPoint:
        return NamedPoint(self.name, self.to_domain())


class RankRequest(BaseModel):
    customers: list[CustomerSchema] = []
    reference: Optional[PointSchema] = Field(
        None,
        description="Valet position. Resolved via the location service when omitted.",
    )


class DistanceRequest(BaseModel):
    point_a: PointSchema
    point_b: PointSchema


# ── Responses ─────────────────────────────────────────────────────────


class ProximityEntryResponse(BaseModel):
    name: str
    distance_km: float

    model_config = {"from_attributes": True}


class RankResponse(BaseModel):
    reference: PointSchema
    entries: list[ProximityEntryResponse]


class DistanceResponse(BaseModel):
    distance_km: float


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
