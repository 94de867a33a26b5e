"""Mapping from Yelp-shaped business records to FoodIQ display models."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from foodiq.exceptions import MalformedRecordError
from foodiq.models import (
    Coordinates,
    RestaurantDetail,
    RestaurantSummary,
    YelpBusiness,
    YelpCategory,
    YelpLocation,
)

logger = logging.getLogger(__name__)

METERS_PER_MILE = 1609.34
PRICE_UNKNOWN = "N/A"
MAX_RATING = 5.0
OPEN_NOW = "Open Now"
CLOSED = "Closed"

DELIVERY_TAG = "delivery"
PICKUP_TAG = "pickup"
RESERVATION_TAG = "restaurant_reservation"


def format_address(location: YelpLocation | None) -> str:
    """Format a Yelp location block into a single address line.

    Missing components become empty strings, so a partially known address
    keeps its punctuation (``", Austin, TX 78701"``).
    """
    if location is None:
        location = YelpLocation()

    address1 = location.address1 or ""
    city = location.city or ""
    state = location.state or ""
    zip_code = location.zip_code or ""

    return f"{address1}, {city}, {state} {zip_code}".strip()


def meters_to_miles(meters: float | None) -> str | None:
    """Convert meters to miles, formatted with two decimals."""
    if meters is None:
        return None
    return f"{meters / METERS_PER_MILE:.2f}"


def extract_categories(categories: list[YelpCategory]) -> list[str]:
    """Return category titles in source order."""
    return [category.title for category in categories if category.title]


def _parse(record: Mapping[str, Any] | YelpBusiness) -> YelpBusiness:
    if isinstance(record, YelpBusiness):
        business = record
    elif isinstance(record, Mapping):
        try:
            business = YelpBusiness.model_validate(dict(record))
        except ValidationError as e:
            raise MalformedRecordError(f"Unreadable business record: {e}") from e
    else:
        msg = f"Business record must be an object, got {type(record).__name__}"
        raise MalformedRecordError(msg)

    if not business.id or not business.id.strip():
        raise MalformedRecordError("Business record has no id")
    if not business.name or not business.name.strip():
        raise MalformedRecordError(f"Business record {business.id} has no name")
    return business


def _summary_fields(business: YelpBusiness) -> dict[str, Any]:
    coordinates = None
    if business.coordinates is not None:
        coordinates = Coordinates(
            latitude=business.coordinates.latitude,
            longitude=business.coordinates.longitude,
        )

    return {
        "id": business.id,
        "name": business.name,
        "image": business.image_url or None,
        "rating": min(max(business.rating or 0.0, 0.0), MAX_RATING),
        "review_count": max(business.review_count or 0, 0),
        "price": business.price or PRICE_UNKNOWN,
        "phone": business.phone or "",
        "address": format_address(business.location),
        "coordinates": coordinates,
        "categories": extract_categories(business.categories),
        "distance": meters_to_miles(business.distance),
        "is_closed": bool(business.is_closed),
        "url": business.url or "",
    }


def _build(model: type[RestaurantSummary], fields: dict[str, Any], business_id: str):
    try:
        return model(**fields)
    except ValidationError as e:
        raise MalformedRecordError(
            f"Business record {business_id} has invalid fields: {e}"
        ) from e


def normalize_summary(record: Mapping[str, Any] | YelpBusiness) -> RestaurantSummary:
    """Normalize a business record into a list-view summary.

    Raises:
        MalformedRecordError: If the record lacks an id or a name
    """
    business = _parse(record)
    return _build(RestaurantSummary, _summary_fields(business), business.id)


def normalize_detail(record: Mapping[str, Any] | YelpBusiness) -> RestaurantDetail:
    """Normalize a business record into a details-view record.

    Only the first hours entry is consulted for the open/closed state;
    weekly schedules are not interpreted.

    Raises:
        MalformedRecordError: If the record lacks an id or a name
    """
    business = _parse(record)
    fields = _summary_fields(business)
    transactions = list(business.transactions)
    first_schedule = business.hours[0] if business.hours else None

    fields.update(
        {
            "phone": business.display_phone or business.phone or "",
            "photos": list(business.photos),
            "hours": OPEN_NOW if first_schedule and first_schedule.is_open_now else CLOSED,
            "transactions": transactions,
            "specialties": ", ".join(fields["categories"]),
            "delivery": DELIVERY_TAG in transactions,
            "pickup": PICKUP_TAG in transactions,
            "reservations": RESERVATION_TAG in transactions,
        }
    )
    return _build(RestaurantDetail, fields, business.id)
