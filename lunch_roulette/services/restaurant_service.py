"""Restaurant search service: Azure Maps results filtered down to restaurants."""
import logging
from typing import Any, Mapping

from lunch_roulette.config.settings import SearchPolicySettings, env_files
from lunch_roulette.schemas.restaurant import Restaurant, RestaurantSearchQuery
from lunch_roulette.services.maps_client import AzureMapsClient

logger = logging.getLogger(__name__)


def is_relevant(entry: Mapping[str, Any], min_score: float, category: str) -> bool:
    # score and poi.categories are required; a missing one is a malformed payload
    return entry["score"] > min_score and category in entry["poi"]["categories"]


def to_restaurant(entry: Mapping[str, Any]) -> Restaurant:
    poi = entry["poi"]
    return Restaurant(
        name=poi.get("name"),
        phone=poi.get("phone"),
        url=poi.get("url"),
        address=entry["address"].get("freeformAddress"),
    )


def filter_restaurants(
    payload: Mapping[str, Any],
    min_score: float,
    category: str,
) -> list[Restaurant]:
    """Keep confident matches in the required category, in upstream order."""
    return [
        to_restaurant(entry)
        for entry in payload["results"]
        if is_relevant(entry, min_score, category)
    ]


class RestaurantSearchService:
    def __init__(self, maps_client: AzureMapsClient | None = None):
        self.maps = maps_client or AzureMapsClient()

    async def search(self, query: RestaurantSearchQuery) -> list[Restaurant]:
        policy = SearchPolicySettings(_env_file=env_files())
        payload = await self.maps.search_poi(query, policy.query_term)
        restaurants = filter_restaurants(payload, policy.min_score, policy.required_category)
        logger.info(
            f"Found {len(restaurants)} restaurants out of {len(payload['results'])} results"
        )
        return restaurants
