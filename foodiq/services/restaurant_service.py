"""Restaurant query service used by every FoodIQ client."""

import logging

from foodiq.config import Config
from foodiq.exceptions import (
    DETAILS_FAILED_MESSAGE,
    SEARCH_FAILED_MESSAGE,
    FoodIQError,
    ProviderFailureError,
)
from foodiq.models import RestaurantDetail, RestaurantSummary
from foodiq.services.providers import RestaurantProvider, create_provider

logger = logging.getLogger(__name__)


class RestaurantService:
    """Service for searching and looking up restaurants.

    The service is source-agnostic: it delegates to whichever provider the
    configuration selects and never re-orders provider results. Errors
    reaching callers are always FoodIQError subclasses; a missing record
    is reported as None.
    """

    def __init__(
        self, config: Config, provider: RestaurantProvider | None = None
    ) -> None:
        """Initialize the restaurant service.

        Args:
            config: Application configuration
            provider: Data provider, created from config when omitted
        """
        self.config = config
        self.provider = provider if provider is not None else create_provider(config)
        logger.info(f"Initialized restaurant service with provider: {self.provider.name}")

    async def search(
        self, term: str = "", location: str = "", limit: int | None = None
    ) -> list[RestaurantSummary]:
        """Search restaurants by food term and location.

        Args:
            term: Food type or name, e.g. "pizza"; empty matches everything
            location: City or postal code; blank uses the default location
            limit: Maximum number of results (defaults to config.default_limit)

        Returns:
            Restaurant summaries in provider order

        Raises:
            ProviderFailureError: If the provider could not be queried
        """
        term = (term or "").strip()
        location = (location or "").strip() or self.config.default_location
        if limit is None:
            limit = self.config.default_limit
        limit = max(limit, 0)

        logger.info(f"Searching restaurants: term='{term}' location='{location}' limit={limit}")
        try:
            return await self.provider.search(term, location, limit)
        except FoodIQError:
            raise
        except Exception:
            logger.exception("Unexpected provider error during search")
            raise ProviderFailureError(SEARCH_FAILED_MESSAGE) from None

    async def search_by_category(
        self, category: str, location: str = ""
    ) -> list[RestaurantSummary]:
        """Search restaurants by category, e.g. "chinese" or "vegan"."""
        return await self.search(category, location)

    async def get_by_id(self, business_id: str) -> RestaurantDetail | None:
        """Get restaurant details by ID.

        Args:
            business_id: Provider business ID

        Returns:
            RestaurantDetail if found, None otherwise

        Raises:
            MalformedRecordError: If the stored record lacks an id or name
            ProviderFailureError: If the provider could not be queried
        """
        business_id = (business_id or "").strip()
        if not business_id:
            return None

        logger.info(f"Looking up restaurant: {business_id}")
        try:
            return await self.provider.get_by_id(business_id)
        except FoodIQError:
            raise
        except Exception:
            logger.exception("Unexpected provider error during lookup")
            raise ProviderFailureError(DETAILS_FAILED_MESSAGE) from None
