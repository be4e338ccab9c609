"""Port interfaces for the event space booking tracker.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - ClockPort: Read the current local calendar date
   - IdGeneratorPort: Produce unique opaque identifiers
   - DescriptionPort: Text generation for venue descriptions

2. **Driving Ports** (adapters/external systems call into core)
   - BookingPort: Venue management, calendar navigation, bookings
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import date

from .models import Booking, MonthGrid, MonthView, Venue, VenueDraft

DESCRIPTION_ERROR_PREFIX = "Error:"


def is_description_error(text: str) -> bool:
    """True if a DescriptionPort result is a failure message, not a description."""
    return text.startswith(DESCRIPTION_ERROR_PREFIX)


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class ClockPort(ABC):
    """Port for reading the current real-world date.

    Today/past classification depends on this. Tests substitute a fixed
    clock so calendar behavior is deterministic.
    """

    @abstractmethod
    def today(self) -> date:
        """Return the current local calendar date (no time component)."""


class IdGeneratorPort(ABC):
    """Port for generating identifiers for venues and bookings."""

    @abstractmethod
    def new_id(self) -> str:
        """Return a new identifier, unique for the process lifetime."""


class DescriptionPort(ABC):
    """Port for generating a venue description from keywords.

    Adapters wrap an external text-generation service. The contract is
    string-only: failures are reported as text starting with
    DESCRIPTION_ERROR_PREFIX (see is_description_error).

    Implementations must:
    - Return "" when keywords are blank, without contacting the service
    - Return a human-readable error string, prefixed with
      DESCRIPTION_ERROR_PREFIX, instead of raising on failure
    """

    @abstractmethod
    async def generate_description(self, keywords: str) -> str:
        """Generate a short venue description.

        Args:
            keywords: Free-text keywords, e.g. "modern, downtown, great view".

        Returns:
            Generated description, "" for blank keywords, or an error
            message if generation failed.
        """


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class BookingPort(ABC):
    """Port for user-initiated operations from the UI layer.

    Rejected operations (unknown ids, unbookable dates) are no-ops that
    return None/False rather than raising.
    """

    @abstractmethod
    def list_venues(self, filter_text: str | None = None) -> Sequence[Venue]:
        """List venues whose name or location contains filter_text.

        Args:
            filter_text: Case-insensitive substring. Empty or None returns all.

        Returns:
            Matching venues, most recently created first.
        """

    @abstractmethod
    def get_venue(self, venue_id: str) -> Venue | None:
        """Return the venue with the given id, or None."""

    @abstractmethod
    def selected_venue(self) -> Venue | None:
        """Return the currently selected venue, or None."""

    @abstractmethod
    def select_venue(self, venue_id: str) -> Venue | None:
        """Select a venue.

        Returns:
            The selected venue, or None if the id is unknown (selection
            unchanged).
        """

    @abstractmethod
    def create_venue(self, draft: VenueDraft) -> Venue:
        """Create a venue from validated form values and select it."""

    @abstractmethod
    def update_venue(self, venue_id: str, draft: VenueDraft) -> Venue | None:
        """Merge edited values into an existing venue.

        Returns:
            The updated venue, or None if the id is unknown.
        """

    @abstractmethod
    def delete_venue(self, venue_id: str) -> bool:
        """Delete a venue.

        Returns:
            True if a venue was removed, False if the id is unknown.
        """

    @abstractmethod
    def add_booking(self, venue_id: str, day: date) -> Booking | None:
        """Book a whole day for a venue.

        Returns:
            The new booking, or None if the venue is unknown or the date is
            in the past or already booked.
        """

    @abstractmethod
    def month_grid(self, venue_id: str | None = None) -> MonthGrid:
        """Classified grid for the current view month.

        Args:
            venue_id: Venue whose bookings mark days as booked. Defaults to
                the selected venue; no days are booked if neither exists.
        """

    @abstractmethod
    def view_month(self) -> MonthView:
        """Return the month currently displayed."""

    @abstractmethod
    def next_month(self) -> MonthView:
        """Advance the view by one month and return it."""

    @abstractmethod
    def previous_month(self) -> MonthView:
        """Move the view back by one month and return it."""

    @abstractmethod
    async def suggest_description(self, keywords: str) -> str:
        """Generate a description suggestion for the venue form."""
