"""Domain models for the event space booking tracker.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

import calendar
import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


def normalize_date(value: date | datetime) -> date:
    """Discard any time-of-day component and return the calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class Booking:
    """A single whole-day reservation belonging to one venue."""

    id: str
    date: date

    def __post_init__(self) -> None:
        """Normalize the booked date to calendar-day granularity."""
        if not self.id or not self.id.strip():
            raise ValueError("id must be a non-empty string")
        object.__setattr__(self, "date", normalize_date(self.date))


@dataclass(frozen=True)
class VenueDraft:
    """Validated field values submitted for a new or edited venue.

    Everything a venue carries except its identity and its bookings.
    """

    name: str
    location: str
    capacity: int
    price_per_day: float
    description: str = ""
    image_url: str = ""
    amenities: tuple[str, ...] = ()  # immutable for frozen dataclass

    def __post_init__(self) -> None:
        """Validate required fields on creation."""
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")
        if not self.location or not self.location.strip():
            raise ValueError("location must be a non-empty string")
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if not math.isfinite(self.price_per_day) or self.price_per_day < 0:
            raise ValueError(
                f"price_per_day must be a finite non-negative number, got {self.price_per_day}"
            )
        if isinstance(self.amenities, list):
            object.__setattr__(self, "amenities", tuple(self.amenities))


@dataclass
class Venue:
    """A bookable event space.

    Bookings are kept sorted ascending by date and never share a date.

    Note: This dataclass is intentionally mutable so that edits and new
    bookings are applied in place while the id stays fixed.
    """

    id: str
    name: str
    location: str
    capacity: int
    price_per_day: float
    description: str = ""
    image_url: str = ""
    amenities: list[str] = field(default_factory=list)
    bookings: list[Booking] = field(default_factory=list)

    @classmethod
    def from_draft(cls, venue_id: str, draft: VenueDraft) -> "Venue":
        """Create a venue with no bookings from submitted form values."""
        return cls(
            id=venue_id,
            name=draft.name,
            location=draft.location,
            capacity=draft.capacity,
            price_per_day=draft.price_per_day,
            description=draft.description,
            image_url=draft.image_url,
            amenities=list(draft.amenities),
        )

    def apply_draft(self, draft: VenueDraft) -> None:
        """Merge edited field values, keeping id and bookings."""
        self.name = draft.name
        self.location = draft.location
        self.capacity = draft.capacity
        self.price_per_day = draft.price_per_day
        self.description = draft.description
        self.image_url = draft.image_url
        self.amenities = list(draft.amenities)

    @property
    def booked_dates(self) -> frozenset[date]:
        """Normalized dates of all bookings."""
        return frozenset(booking.date for booking in self.bookings)

    def is_booked_on(self, day: date | datetime) -> bool:
        return normalize_date(day) in self.booked_dates

    def add_booking(self, booking: Booking) -> None:
        """Append a booking and restore ascending date order.

        Raises:
            ValueError: If the venue already has a booking on that date.
        """
        if booking.date in self.booked_dates:
            raise ValueError(
                f"Venue {self.id} is already booked on {booking.date.isoformat()}"
            )
        self.bookings.append(booking)
        self.bookings.sort(key=lambda b: b.date)

    def matches(self, filter_text: str | None) -> bool:
        """Case-insensitive substring match against name or location."""
        if not filter_text:
            return True
        needle = filter_text.lower()
        return needle in self.name.lower() or needle in self.location.lower()


@dataclass(frozen=True, order=True)
class MonthView:
    """A calendar month, with month numbered 1..12."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {self.month}")

    @classmethod
    def containing(cls, day: date | datetime) -> "MonthView":
        return cls(day.year, day.month)

    def next(self) -> "MonthView":
        """The following month, rolling December over into January."""
        if self.month == 12:
            return MonthView(self.year + 1, 1)
        return MonthView(self.year, self.month + 1)

    def previous(self) -> "MonthView":
        """The preceding month, rolling January back into December."""
        if self.month == 1:
            return MonthView(self.year - 1, 12)
        return MonthView(self.year, self.month - 1)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def first_weekday(self) -> int:
        """Weekday of day 1, Sunday-based (0=Sunday .. 6=Saturday)."""
        # date.weekday() is Monday-based
        return (self.first_day.weekday() + 1) % 7

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def label(self) -> str:
        """Display label such as 'October 2026'."""
        return f"{calendar.month_name[self.month]} {self.year}"


class DayStatus(Enum):
    """Interaction state of a single calendar day.

    Booked takes precedence over past for display purposes. Only
    AVAILABLE days accept new bookings.
    """

    AVAILABLE = "available"
    BOOKED = "booked"
    PAST = "past"


@dataclass(frozen=True)
class DayCell:
    """Classification of one date in a month grid."""

    date: date
    is_booked: bool
    is_past: bool
    is_today: bool

    @property
    def is_selectable(self) -> bool:
        """A day accepts a new booking iff it is neither past nor booked."""
        return not self.is_past and not self.is_booked

    @property
    def status(self) -> DayStatus:
        if self.is_booked:
            return DayStatus.BOOKED
        if self.is_past:
            return DayStatus.PAST
        return DayStatus.AVAILABLE


@dataclass(frozen=True)
class MonthGrid:
    """A month laid out for a Sunday-first, 7-column calendar.

    `cells` holds `leading_blanks` placeholders (None) followed by one
    DayCell per day of the month. Cells after the last day are absent.
    """

    month: MonthView
    leading_blanks: int
    days: tuple[DayCell, ...]  # immutable for frozen dataclass

    @property
    def cells(self) -> tuple[DayCell | None, ...]:
        return (None,) * self.leading_blanks + self.days

    def weeks(self) -> Iterator[tuple[DayCell | None, ...]]:
        """Yield 7-cell rows, padding the final row with None."""
        cells = self.cells
        for start in range(0, len(cells), 7):
            row = cells[start : start + 7]
            yield row + (None,) * (7 - len(row))

    def day(self, day_of_month: int) -> DayCell:
        """Return the cell for a 1-based day of the month."""
        if not 1 <= day_of_month <= len(self.days):
            raise ValueError(
                f"day must be between 1 and {len(self.days)}, got {day_of_month}"
            )
        return self.days[day_of_month - 1]
