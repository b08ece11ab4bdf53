"""
Shifts API connector package.
"""

from .core import ShiftsApiClient
from .models import (
    ShiftsApiClientError,
    ShiftsApiDecodeError,
    ShiftsApiError,
    ShiftsApiNotFoundError,
)

__all__ = [
    "ShiftsApiClient",
    "ShiftsApiError",
    "ShiftsApiClientError",
    "ShiftsApiNotFoundError",
    "ShiftsApiDecodeError",
]
