"""Per-client search state with protection against stale responses."""

import logging

from pydantic import BaseModel, Field

from foodiq.exceptions import FoodIQError, MalformedRecordError
from foodiq.models import RestaurantDetail, RestaurantSummary
from foodiq.services.restaurant_service import RestaurantService

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No restaurants found. Try a different search."
NOT_FOUND_MESSAGE = "Restaurant not found. Please try again."
GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."


class SearchState(BaseModel):
    """What a results screen shows after a search."""

    term: str = Field(default="", description="Submitted food term")
    location: str = Field(default="", description="Submitted location")
    restaurants: list[RestaurantSummary] = Field(default_factory=list)
    error: str | None = Field(None, description="Neutral message to display")
    has_searched: bool = Field(default=False, description="A search has completed")


class DetailState(BaseModel):
    """What a details screen shows after a lookup."""

    business_id: str = Field(description="Requested business ID")
    restaurant: RestaurantDetail | None = None
    error: str | None = Field(None, description="Neutral message to display")


class SearchSession:
    """Holds the latest search and detail state for one client.

    Every request gets a generation number. A response whose generation is
    older than the latest submitted request is discarded, so a slow earlier
    search can never overwrite a newer one. Errors become display messages;
    nothing here raises.
    """

    def __init__(self, service: RestaurantService) -> None:
        """Initialize the session.

        Args:
            service: Query service used for all requests
        """
        self.service = service
        self.state = SearchState()
        self.detail: DetailState | None = None
        self._search_generation = 0
        self._detail_generation = 0

    @property
    def search_generation(self) -> int:
        """Generation number of the most recently submitted search."""
        return self._search_generation

    async def submit(
        self, term: str = "", location: str = "", limit: int | None = None
    ) -> SearchState | None:
        """Run a search and record its result.

        Returns:
            The new state, or None if a newer search was submitted while
            this one was in flight
        """
        self._search_generation += 1
        generation = self._search_generation

        restaurants: list[RestaurantSummary] = []
        error: str | None = None
        try:
            restaurants = await self.service.search(term, location, limit)
            if not restaurants:
                error = NO_RESULTS_MESSAGE
        except FoodIQError as e:
            logger.warning(f"Search failed: {e}")
            error = str(e) or GENERIC_ERROR_MESSAGE

        if generation != self._search_generation:
            logger.debug(
                f"Discarding stale search #{generation} "
                f"(latest is #{self._search_generation})"
            )
            return None

        self.state = SearchState(
            term=term,
            location=location,
            restaurants=restaurants,
            error=error,
            has_searched=True,
        )
        return self.state

    async def open_details(self, business_id: str) -> DetailState | None:
        """Look up one restaurant and record the result.

        Returns:
            The new detail state, or None if a newer lookup was started
            while this one was in flight
        """
        self._detail_generation += 1
        generation = self._detail_generation

        restaurant: RestaurantDetail | None = None
        error: str | None = None
        try:
            restaurant = await self.service.get_by_id(business_id)
            if restaurant is None:
                error = NOT_FOUND_MESSAGE
        except MalformedRecordError as e:
            logger.warning(f"Malformed restaurant record {business_id}: {e}")
            error = GENERIC_ERROR_MESSAGE
        except FoodIQError as e:
            logger.warning(f"Detail lookup failed: {e}")
            error = str(e) or GENERIC_ERROR_MESSAGE

        if generation != self._detail_generation:
            logger.debug(f"Discarding stale detail lookup for {business_id}")
            return None

        self.detail = DetailState(business_id=business_id, restaurant=restaurant, error=error)
        return self.detail
