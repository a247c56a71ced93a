# Business logic services

from .maps_client import AzureMapsClient, build_search_params
from .restaurant_service import RestaurantSearchService, filter_restaurants

__all__ = [
    "AzureMapsClient",
    "build_search_params",
    "RestaurantSearchService",
    "filter_restaurants",
]
