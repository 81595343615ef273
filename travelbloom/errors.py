from __future__ import annotations

EMPTY_QUERY_MESSAGE = (
    'Type a keyword like "beach", "temple", "country", or a country/city name.'
)
NOT_READY_MESSAGE = "Data is still loading. Try again in a moment."
LOAD_FAILED_MESSAGE = (
    "Unable to load recommendation data. Check the dataset path and try again."
)


class TravelBloomError(Exception):
    """Base error carrying a message that is safe to show on the page."""

    message: str = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DatasetLoadError(TravelBloomError):
    message = LOAD_FAILED_MESSAGE


class EmptyQueryError(TravelBloomError):
    message = EMPTY_QUERY_MESSAGE


class DatasetNotReadyError(TravelBloomError):
    message = NOT_READY_MESSAGE
