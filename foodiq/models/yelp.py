"""Provider-native business records as returned by the Yelp Fusion API.

Every field is optional. Yelp omits fields freely and sends ``null`` for
others, so lists given as ``null`` are read as empty lists. Values of the
wrong shape in optional fields are read as missing rather than rejecting
the whole record; only ``id`` and ``name`` are checked downstream.
"""

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_float(value: Any) -> float | None:
    """Read a finite number, or None for anything else."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _as_text(value: Any) -> str | None:
    """Read a string, stringifying plain numbers (zip codes), else None."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


class YelpLocation(BaseModel):
    """Postal address block of a business."""

    model_config = ConfigDict(extra="ignore")

    address1: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None

    @field_validator("address1", "city", "state", "zip_code", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        return _as_text(value)


class YelpCoordinates(BaseModel):
    """Latitude/longitude block of a business."""

    model_config = ConfigDict(extra="ignore")

    latitude: float | None = None
    longitude: float | None = None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _lenient_float(cls, value: Any) -> float | None:
        return _as_float(value)


class YelpCategory(BaseModel):
    """Category entry; only the display title is used."""

    model_config = ConfigDict(extra="ignore")

    alias: str | None = None
    title: str | None = None

    @field_validator("alias", "title", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        return _as_text(value)


class YelpHours(BaseModel):
    """Opening schedule entry; only the current-status flag is used."""

    model_config = ConfigDict(extra="ignore")

    hours_type: str | None = None
    is_open_now: bool | None = None

    @field_validator("hours_type", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        return _as_text(value)

    @field_validator("is_open_now", mode="before")
    @classmethod
    def _lenient_bool(cls, value: Any) -> bool | None:
        return value if isinstance(value, bool) else None


class YelpBusiness(BaseModel):
    """A business from ``/businesses/search`` or ``/businesses/{id}``."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str | None = None
    image_url: str | None = None
    url: str | None = None
    rating: float | None = None
    review_count: int | None = None
    price: str | None = None
    phone: str | None = None
    display_phone: str | None = None
    location: YelpLocation | None = None
    coordinates: YelpCoordinates | None = None
    categories: list[YelpCategory] = Field(default_factory=list)
    distance: float | None = Field(None, description="Distance in meters")
    is_closed: bool | None = None
    transactions: list[str] = Field(default_factory=list)
    photos: list[str] = Field(default_factory=list)
    hours: list[YelpHours] = Field(default_factory=list)

    @field_validator("image_url", "url", "price", "phone", "display_phone", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        return _as_text(value)

    @field_validator("rating", "distance", mode="before")
    @classmethod
    def _lenient_float(cls, value: Any) -> float | None:
        return _as_float(value)

    @field_validator("review_count", mode="before")
    @classmethod
    def _lenient_int(cls, value: Any) -> int | None:
        number = _as_float(value)
        return None if number is None else int(number)

    @field_validator("is_closed", mode="before")
    @classmethod
    def _lenient_bool(cls, value: Any) -> bool | None:
        return value if isinstance(value, bool) else None

    @field_validator("location", "coordinates", mode="before")
    @classmethod
    def _object_or_none(cls, value: Any) -> Any:
        return value if isinstance(value, Mapping) else None

    @field_validator("categories", mode="before")
    @classmethod
    def _categories(cls, value: Any) -> list:
        # Plain labels ("Pizza") are accepted alongside {"title": "Pizza"}
        if not isinstance(value, list):
            return []
        categories = []
        for item in value:
            if isinstance(item, str):
                categories.append({"title": item})
            elif isinstance(item, Mapping):
                categories.append(item)
        return categories

    @field_validator("transactions", "photos", mode="before")
    @classmethod
    def _string_list(cls, value: Any) -> list[str]:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]

    @field_validator("hours", mode="before")
    @classmethod
    def _object_list(cls, value: Any) -> list:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, Mapping)]


class YelpSearchResponse(BaseModel):
    """Envelope of ``/businesses/search``.

    Businesses are kept as raw mappings so one malformed entry can be
    dropped without rejecting the whole page.
    """

    model_config = ConfigDict(extra="ignore")

    businesses: list[dict[str, Any]]
    total: int | None = None
