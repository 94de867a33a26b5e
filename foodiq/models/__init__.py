"""Data models for the FoodIQ system."""

from foodiq.models.restaurant import Coordinates, RestaurantDetail, RestaurantSummary
from foodiq.models.yelp import (
    YelpBusiness,
    YelpCategory,
    YelpCoordinates,
    YelpHours,
    YelpLocation,
    YelpSearchResponse,
)

__all__ = [
    "Coordinates",
    "RestaurantDetail",
    "RestaurantSummary",
    "YelpBusiness",
    "YelpCategory",
    "YelpCoordinates",
    "YelpHours",
    "YelpLocation",
    "YelpSearchResponse",
]
