"""HTTP Controllers."""

from places.presentation.http.controllers.health import router as health_router
from places.presentation.http.controllers.maintenance import router as maintenance_router
from places.presentation.http.controllers.places import router as places_router

__all__ = ["health_router", "maintenance_router", "places_router"]
