"""
Dependency providers for FastAPI routes.
"""

from fastapi import Depends

from lunch_roulette.services.maps_client import AzureMapsClient
from lunch_roulette.services.restaurant_service import RestaurantSearchService


def get_maps_client() -> AzureMapsClient:
    """Provide the Azure Maps client (overridden in tests)."""
    return AzureMapsClient()


def get_restaurant_service(
    maps_client: AzureMapsClient = Depends(get_maps_client),
) -> RestaurantSearchService:
    """Provide the restaurant search service for a request."""
    return RestaurantSearchService(maps_client)
