"""In-memory venue store with a single optional selection.

Venues are kept most-recently-created first. Operations on unknown ids
are no-ops rather than errors.
"""

import logging
from collections.abc import Iterable

from .models import Booking, Venue, VenueDraft
from .ports import IdGeneratorPort

logger = logging.getLogger(__name__)


class VenueStore:
    """Authoritative collection of venues and the selected venue."""

    def __init__(self, id_generator: IdGeneratorPort, venues: Iterable[Venue] = ()):
        """Initialize the store.

        Args:
            id_generator: IdGeneratorPort used for new venue ids.
            venues: Initial venues in display order. The first one, if any,
                becomes the selection.
        """
        self.id_generator = id_generator
        self._venues: list[Venue] = list(venues)
        self._selected_id: str | None = self._venues[0].id if self._venues else None

    def __len__(self) -> int:
        return len(self._venues)

    def list(self, filter_text: str | None = None) -> list[Venue]:
        """Venues whose name or location contains filter_text, in store order."""
        return [venue for venue in self._venues if venue.matches(filter_text)]

    def get(self, venue_id: str) -> Venue | None:
        for venue in self._venues:
            if venue.id == venue_id:
                return venue
        return None

    @property
    def selected(self) -> Venue | None:
        if self._selected_id is None:
            return None
        return self.get(self._selected_id)

    def select(self, venue_id: str) -> Venue | None:
        venue = self.get(venue_id)
        if venue is None:
            logger.warning(
                f"Cannot select unknown venue {venue_id}",
                extra={"venue_id": venue_id},
            )
            return None
        self._selected_id = venue.id
        return venue

    def clear_selection(self) -> None:
        self._selected_id = None

    def create(self, draft: VenueDraft) -> Venue:
        """Add a new venue at the front of the list and select it."""
        venue = Venue.from_draft(self.id_generator.new_id(), draft)
        self._venues.insert(0, venue)
        self._selected_id = venue.id

        logger.info(
            f"Venue {venue.id} created",
            extra={"venue_id": venue.id, "venue_name": venue.name},
        )
        return venue

    def update(self, venue_id: str, draft: VenueDraft) -> Venue | None:
        """Merge edited values into a venue, preserving its id and bookings."""
        venue = self.get(venue_id)
        if venue is None:
            logger.warning(
                f"Cannot update unknown venue {venue_id}",
                extra={"venue_id": venue_id},
            )
            return None

        # The selection holds the id, so readers of `selected` see the merge.
        venue.apply_draft(draft)

        logger.info(
            f"Venue {venue_id} updated",
            extra={"venue_id": venue_id, "venue_name": venue.name},
        )
        return venue

    def delete(self, venue_id: str) -> bool:
        """Remove a venue; a deleted selection falls back to the first remaining venue."""
        venue = self.get(venue_id)
        if venue is None:
            logger.warning(
                f"Cannot delete unknown venue {venue_id}",
                extra={"venue_id": venue_id},
            )
            return False

        self._venues.remove(venue)
        if self._selected_id == venue_id:
            self._selected_id = self._venues[0].id if self._venues else None

        logger.info(
            f"Venue {venue_id} deleted",
            extra={"venue_id": venue_id, "selected_id": self._selected_id},
        )
        return True

    def append_booking(self, venue_id: str, booking: Booking) -> Venue | None:
        """Attach a validated booking to a venue, keeping date order.

        Raises:
            ValueError: If the venue already has a booking on that date.
        """
        venue = self.get(venue_id)
        if venue is None:
            return None
        venue.add_booking(booking)
        return venue
