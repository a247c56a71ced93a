"""Restaurant search endpoint."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from lunch_roulette.core.dependencies import get_restaurant_service
from lunch_roulette.core.exceptions import MissingRequiredParameterError
from lunch_roulette.schemas.restaurant import Restaurant, RestaurantSearchQuery
from lunch_roulette.services.restaurant_service import RestaurantSearchService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["restaurants"])


@router.api_route("/restaurants", methods=["GET", "POST"], response_model=list[Restaurant])
async def search_restaurants(
    latitude: Optional[str] = Query(None),
    longitude: Optional[str] = Query(None),
    categories: Optional[List[str]] = Query(None),
    price: Optional[str] = Query(None),
    distance: Optional[str] = Query(None),
    service: RestaurantSearchService = Depends(get_restaurant_service),
):
    """
    Find restaurants near a coordinate.

    Values are passed through to Azure Maps without validation; only the
    presence of latitude and longitude is checked. A repeated ``categories``
    key is merged into one comma-separated list.
    """
    logger.info("Processing Azure Maps request.")

    if not latitude or not longitude:
        missing = [name for name, value in (("latitude", latitude), ("longitude", longitude)) if not value]
        raise MissingRequiredParameterError(missing)

    query = RestaurantSearchQuery(
        latitude=latitude,
        longitude=longitude,
        categories=",".join(categories) if categories else None,
        price=price,
        distance=distance,
    )
    return await service.search(query)
