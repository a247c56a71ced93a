"""Azure Maps POI search client."""

import logging
from typing import Any, Dict, Optional

import httpx

from lunch_roulette.config.settings import AzureMapsSettings, env_files
from lunch_roulette.core.exceptions import UpstreamCallFailedError
from lunch_roulette.core.metrics import record_upstream_failure, record_upstream_latency
from lunch_roulette.schemas.restaurant import RestaurantSearchQuery

logger = logging.getLogger(__name__)

SEARCH_PATH = "/search/poi/json"
DEFAULT_QUERY_TERM = "restaurant"


def build_search_params(
    query: RestaurantSearchQuery,
    maps_settings: AzureMapsSettings,
    query_term: str,
) -> Dict[str, str]:
    """
    Build the POI search query string.

    Optional values that were not supplied are sent as empty strings.
    """
    return {
        "api-version": maps_settings.api_version,
        "query": query_term,
        "subscription-key": maps_settings.subscription_key or "",
        "lat": query.latitude,
        "lon": query.longitude,
        "radius": query.distance or "",
        "category": ",".join(query.categories or []),
        "price": query.price or "",
    }


class AzureMapsClient:
    """Issues POI searches against Azure Maps."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport

    def _client_kwargs(self, maps_settings: AzureMapsSettings) -> Dict[str, Any]:
        # Success is judged on the final response, after any redirects
        kwargs: Dict[str, Any] = {"follow_redirects": True}
        if maps_settings.timeout_seconds is not None:
            kwargs["timeout"] = maps_settings.timeout_seconds
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    async def search_poi(
        self,
        query: RestaurantSearchQuery,
        query_term: str = DEFAULT_QUERY_TERM,
    ) -> Any:
        """
        Run a single POI search and return the decoded JSON document.

        Azure Maps settings are read on every call so a rotated key is
        picked up without a restart.

        Raises:
            UpstreamCallFailedError: Azure Maps answered with a non-success status
        """
        maps_settings = AzureMapsSettings(_env_file=env_files())

        if not maps_settings.subscription_key:
            logger.warning(
                "Azure Maps subscription key not configured. "
                "Set AZURE_MAPS_SUBSCRIPTION_KEY environment variable."
            )

        url = f"{maps_settings.base_url}{SEARCH_PATH}"
        params = build_search_params(query, maps_settings, query_term)

        with record_upstream_latency():
            async with httpx.AsyncClient(**self._client_kwargs(maps_settings)) as client:
                response = await client.get(url, params=params)

        if not response.is_success:
            record_upstream_failure()
            logger.error(
                "Azure Maps API call failed.",
                extra={"upstream_status": response.status_code},
            )
            raise UpstreamCallFailedError(response.status_code)

        return response.json()
