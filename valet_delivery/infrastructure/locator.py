"""
Courier Locator
===============

Resolves the valet's current position with one GET against
``settings.valet_location_url``.  The endpoint must answer with a JSON
object holding numeric ``latitude`` and ``longitude`` keys; anything else
is reported as a :class:`LocationResolutionError`.

No retries: a failed lookup ends the current order cycle.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import BaseModel, Field, ValidationError

from valet_delivery.config import Settings
from valet_delivery.domain.entities import GeoPoint
from valet_delivery.domain.errors import LocationResolutionError

logger = logging.getLogger(__name__)


class CourierLocationPayload(BaseModel):
    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False)

    model_config = {"extra": "ignore"}


class CourierLocator:
    def __init__(
        self, settings: Settings, client: Optional[httpx.Client] = None
    ):
        self.url = settings.valet_location_url
        self.timeout = settings.locator_timeout_seconds
        self._owns_client = client is None
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """The HTTP client, created on first use when none was injected."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def locate(self) -> GeoPoint:
        """Fetch the valet's location, or raise ``LocationResolutionError``."""
        if not self.url:
            raise LocationResolutionError(
                "VALET_LOCATION_URL is not configured"
            )

        logger.info("Resolving valet location from %s", self.url)
        try:
            response = self.client.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LocationResolutionError(
                f"Location service answered {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise LocationResolutionError(
                f"Location service unreachable: {e}"
            ) from e

        try:
            payload = CourierLocationPayload.model_validate_json(response.content)
        except ValidationError as e:
            raise LocationResolutionError(
                "Malformed or out-of-range location response"
            ) from e

        point = GeoPoint(payload.latitude, payload.longitude)
        logger.debug("Valet located at %s", point)
        return point

    def close(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()

    # context-manager support
    def __enter__(self) -> CourierLocator:
        return self

    def __exit__(self, *args) -> None:
        self.close()
