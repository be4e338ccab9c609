"""Core domain logic for the event space booking tracker.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .models import (
    Booking,
    DayCell,
    DayStatus,
    MonthGrid,
    MonthView,
    Venue,
    VenueDraft,
    normalize_date,
)

__all__ = [
    "Booking",
    "DayCell",
    "DayStatus",
    "MonthGrid",
    "MonthView",
    "Venue",
    "VenueDraft",
    "normalize_date",
]
