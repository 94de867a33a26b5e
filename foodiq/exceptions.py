"""Errors raised by the FoodIQ data-access layer.

Callers only ever see these types. A missing record is not an error:
lookups return ``None`` instead.
"""

SEARCH_FAILED_MESSAGE = (
    "Failed to fetch restaurants. Please check your API key and try again."
)
DETAILS_FAILED_MESSAGE = "Failed to fetch restaurant details."


class FoodIQError(Exception):
    """Base class for FoodIQ errors."""


class MalformedRecordError(FoodIQError):
    """A provider record lacks an id or a name, or cannot be read at all."""


class ProviderFailureError(FoodIQError):
    """The provider could not be reached or returned an unusable response.

    The message is safe to show to end users; diagnostic detail is logged
    where the failure happens and is not attached here.
    """

    def __init__(self, message: str = SEARCH_FAILED_MESSAGE) -> None:
        super().__init__(message)
        self.message = message
