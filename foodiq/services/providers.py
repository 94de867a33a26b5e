"""Restaurant data providers: an in-memory dataset and the Yelp Fusion API."""

import abc
import asyncio
import logging
import urllib.parse
from collections.abc import Mapping, Sequence
from typing import Any

import httpx
from pydantic import ValidationError

from foodiq.config import Config
from foodiq.exceptions import (
    DETAILS_FAILED_MESSAGE,
    SEARCH_FAILED_MESSAGE,
    MalformedRecordError,
    ProviderFailureError,
)
from foodiq.models import RestaurantDetail, RestaurantSummary, YelpSearchResponse
from foodiq.services.mock_data import MOCK_BUSINESSES
from foodiq.services.normalizer import normalize_detail, normalize_summary

logger = logging.getLogger(__name__)

# Yelp Fusion rejects search limits above this value
YELP_MAX_LIMIT = 50


class RestaurantProvider(abc.ABC):
    """Interface for sources of restaurant records."""

    name: str = "provider"

    @abc.abstractmethod
    async def search(
        self, term: str, location: str, limit: int
    ) -> list[RestaurantSummary]:
        """Search for restaurants.

        Args:
            term: Food term, empty to match everything
            location: Location to search in, already defaulted by the caller
            limit: Maximum number of results, at least 0

        Returns:
            Summaries in provider order
        """

    @abc.abstractmethod
    async def get_by_id(self, business_id: str) -> RestaurantDetail | None:
        """Fetch one restaurant, or None if the provider has no such id."""


def _normalize_all(records: Sequence[Mapping[str, Any]], limit: int) -> list[RestaurantSummary]:
    """Normalize records up to limit, dropping malformed ones."""
    results: list[RestaurantSummary] = []
    if limit <= 0:
        return results

    for record in records:
        try:
            results.append(normalize_summary(record))
        except MalformedRecordError as e:
            logger.warning(f"Skipping malformed business record: {e}")
            continue
        if len(results) >= limit:
            break
    return results


class LocalDatasetProvider(RestaurantProvider):
    """Provider backed by an in-memory list of Yelp-shaped records.

    Matching is a case-insensitive substring test against the name or the
    space-joined category titles. The location is ignored and results keep
    dataset order.
    """

    name = "mock"

    def __init__(
        self,
        config: Config,
        records: Sequence[Mapping[str, Any]] | None = None,
    ) -> None:
        """Initialize the local provider.

        Args:
            config: Application configuration (latency settings)
            records: Dataset to serve, defaults to the built-in mock data
        """
        self.config = config
        self.records = list(MOCK_BUSINESSES if records is None else records)
        logger.info(f"Local dataset provider initialized with {len(self.records)} records")

    @staticmethod
    def _matches(record: Mapping[str, Any], needle: str) -> bool:
        name = str(record.get("name") or "").lower()
        titles = []
        for category in record.get("categories") or []:
            if isinstance(category, str):
                titles.append(category)
            elif isinstance(category, Mapping):
                titles.append(str(category.get("title") or ""))
        return needle in name or needle in " ".join(titles).lower()

    async def _simulate_latency(self, seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)

    async def search(
        self, term: str, location: str, limit: int
    ) -> list[RestaurantSummary]:
        await self._simulate_latency(self.config.mock_search_delay)

        needle = term.lower()
        matches = [
            record
            for record in self.records
            if isinstance(record, Mapping) and (not needle or self._matches(record, needle))
        ]
        results = _normalize_all(matches, limit)
        logger.info(
            f"Mock search term='{term}' location='{location}': "
            f"{len(results)} of {len(matches)} matches returned"
        )
        return results

    async def get_by_id(self, business_id: str) -> RestaurantDetail | None:
        await self._simulate_latency(self.config.mock_detail_delay)

        for record in self.records:
            if isinstance(record, Mapping) and record.get("id") == business_id:
                return normalize_detail(record)

        logger.info(f"Mock restaurant not found: {business_id}")
        return None


class YelpProvider(RestaurantProvider):
    """Provider backed by the Yelp Fusion business-search API.

    Any transport error, error status, or unreadable body is logged and
    collapsed into a ProviderFailureError with a generic message.
    """

    name = "yelp"

    def __init__(self, config: Config, client: httpx.AsyncClient | None = None) -> None:
        """Initialize the Yelp provider.

        Args:
            config: Application configuration (credential, base URL, timeout)
            client: Shared HTTP client; a short-lived one is opened per
                request when omitted
        """
        self.config = config
        self._client = client
        if not self.config.has_yelp_config():
            logger.warning("Yelp API key not configured - requests will fail")
        else:
            logger.info("Yelp provider initialized")

    def _url(self, path: str) -> str:
        return f"{self.config.yelp_api_base_url.rstrip('/')}{path}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.yelp_api_key}",
            "Accept": "application/json",
        }

    async def _get(
        self, path: str, params: dict[str, Any] | None, failure_message: str
    ) -> httpx.Response:
        if not self.config.has_yelp_config():
            logger.error("Cannot call Yelp: YELP_API_KEY is not configured")
            raise ProviderFailureError(failure_message)

        url = self._url(path)
        try:
            if self._client is not None:
                return await self._client.get(url, headers=self._headers(), params=params)
            async with httpx.AsyncClient(timeout=self.config.request_timeout) as client:
                return await client.get(url, headers=self._headers(), params=params)
        except httpx.HTTPError as e:
            logger.error(f"Error fetching {url} from Yelp: {e.__class__.__name__} - {e}")
            raise ProviderFailureError(failure_message) from None

    @staticmethod
    def _json(response: httpx.Response, failure_message: str) -> Any:
        if response.is_error:
            logger.error(
                f"Yelp returned status {response.status_code} for "
                f"{response.request.url.path}: {response.text[:500]}"
            )
            raise ProviderFailureError(failure_message)
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Unparseable Yelp response body: {e}")
            raise ProviderFailureError(failure_message) from None

    async def search(
        self, term: str, location: str, limit: int
    ) -> list[RestaurantSummary]:
        if limit <= 0:
            return []
        if limit > YELP_MAX_LIMIT:
            logger.debug(f"Capping Yelp search limit {limit} to {YELP_MAX_LIMIT}")
            limit = YELP_MAX_LIMIT

        params = {
            "term": term,
            "location": location,
            "limit": limit,
            "sort_by": "rating",
        }
        logger.info(f"Searching Yelp: term='{term}' location='{location}' limit={limit}")

        response = await self._get("/businesses/search", params, SEARCH_FAILED_MESSAGE)
        data = self._json(response, SEARCH_FAILED_MESSAGE)
        try:
            page = YelpSearchResponse.model_validate(data)
        except ValidationError as e:
            logger.error(f"Unexpected Yelp search response shape: {e}")
            raise ProviderFailureError(SEARCH_FAILED_MESSAGE) from None

        results = _normalize_all(page.businesses, limit)
        logger.info(f"Yelp returned {len(results)} restaurants")
        return results

    async def get_by_id(self, business_id: str) -> RestaurantDetail | None:
        path = f"/businesses/{urllib.parse.quote(business_id, safe='')}"
        logger.info(f"Fetching Yelp business {business_id}")

        response = await self._get(path, None, DETAILS_FAILED_MESSAGE)
        if response.status_code == 404:
            logger.info(f"Yelp business not found: {business_id}")
            return None

        data = self._json(response, DETAILS_FAILED_MESSAGE)
        if not isinstance(data, Mapping):
            logger.error(f"Unexpected Yelp business payload type: {type(data).__name__}")
            raise ProviderFailureError(DETAILS_FAILED_MESSAGE)
        return normalize_detail(data)


def create_provider(config: Config) -> RestaurantProvider:
    """Create the provider named by ``config.data_provider``.

    Raises:
        ValueError: If the provider name is unknown
    """
    if config.data_provider == "mock":
        return LocalDatasetProvider(config)
    if config.data_provider == "yelp":
        return YelpProvider(config)
    msg = f"Unknown data provider: {config.data_provider}"
    raise ValueError(msg)
