"""HTTP Schemas."""

from places.presentation.http.schemas.maintenance import MaintenanceResponse
from places.presentation.http.schemas.place import (
    NearbyPlaceEntry,
    PlaceRequest,
    PlaceResponse,
)

__all__ = ["MaintenanceResponse", "NearbyPlaceEntry", "PlaceRequest", "PlaceResponse"]
