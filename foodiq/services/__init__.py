"""Data-access services for FoodIQ."""

from foodiq.services.providers import (
    LocalDatasetProvider,
    RestaurantProvider,
    YelpProvider,
    create_provider,
)
from foodiq.services.restaurant_service import RestaurantService
from foodiq.services.search_session import DetailState, SearchSession, SearchState

__all__ = [
    "DetailState",
    "LocalDatasetProvider",
    "RestaurantProvider",
    "RestaurantService",
    "SearchSession",
    "SearchState",
    "YelpProvider",
    "create_provider",
]
