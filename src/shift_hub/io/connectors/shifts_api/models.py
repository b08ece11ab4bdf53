"""
Shifts API connector exceptions.
"""


class ShiftsApiError(Exception):
    """Base exception for shifts API failures."""

    pass


class ShiftsApiClientError(ShiftsApiError):
    """Raised when a request fails at the transport or HTTP status level."""

    pass


class ShiftsApiNotFoundError(ShiftsApiClientError):
    """Raised when the requested collection does not exist (404)."""

    pass


class ShiftsApiDecodeError(ShiftsApiError):
    """Raised when a response body is not the expected JSON envelope."""

    pass
