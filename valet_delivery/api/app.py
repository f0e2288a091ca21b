"""
FastAPI application factory.

* Registers routes for deliveries and admin.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from valet_delivery.api.middleware import limiter
from valet_delivery.api.routes import admin, deliveries


def create_app() -> FastAPI:
    app = FastAPI(
        title="Valet Delivery Ordering API",
        description=(
            "Ranks a valet's customers by great-circle distance from the "
            "valet's current position and returns the delivery sequence."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(deliveries.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
