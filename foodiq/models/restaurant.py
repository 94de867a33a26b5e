"""Restaurant display models shared by list and detail views."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Coordinates(BaseModel):
    """Geographic position of a restaurant."""

    model_config = ConfigDict(frozen=True)

    latitude: float | None = Field(None, description="Latitude in degrees")
    longitude: float | None = Field(None, description="Longitude in degrees")


class RestaurantSummary(BaseModel):
    """Restaurant as shown in a search result list."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: str = Field(..., min_length=1, description="Provider business ID")
    name: str = Field(..., min_length=1, description="Restaurant name")
    image: str | None = Field(None, description="Cover image URL")
    rating: float = Field(default=0.0, ge=0, le=5, description="Rating, 0 to 5")
    review_count: int = Field(default=0, ge=0, description="Number of reviews")
    price: str = Field(default="N/A", description="Price tier, N/A when unknown")
    phone: str = Field(default="", description="Phone number")
    address: str = Field(default="", description="Formatted street address")
    coordinates: Coordinates | None = Field(None, description="Map position")
    categories: list[str] = Field(default_factory=list, description="Cuisine labels")
    distance: str | None = Field(None, description="Distance in miles, 2 decimals")
    is_closed: bool = Field(default=False, description="Permanently closed flag")
    url: str = Field(default="", description="Provider page URL")


class RestaurantDetail(RestaurantSummary):
    """Restaurant as shown on the details screen."""

    photos: list[str] = Field(default_factory=list, description="Photo URLs")
    hours: str = Field(default="Closed", description="'Open Now' or 'Closed'")
    transactions: list[str] = Field(
        default_factory=list, description="Provider transaction tags"
    )
    specialties: str = Field(default="", description="Categories joined for display")
    delivery: bool = Field(default=False, description="Offers delivery")
    pickup: bool = Field(default=False, description="Offers pickup")
    reservations: bool = Field(default=False, description="Takes reservations")
