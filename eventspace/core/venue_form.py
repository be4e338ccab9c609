"""Venue create/edit form state.

Turns raw form input into a validated VenueDraft and runs the description
suggestion as a background task. A suggestion is applied only while the
form is open and the keywords it was requested for are still current;
requesting again or closing the form cancels the one in flight.
"""

import asyncio
import logging
from urllib.parse import quote

from .models import Venue, VenueDraft
from .ports import BookingPort, DescriptionPort

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10
DEFAULT_PRICE_PER_DAY = 100.0
PLACEHOLDER_IMAGE_TEMPLATE = "https://picsum.photos/seed/{seed}/800/600"


def parse_amenities(text: str) -> tuple[str, ...]:
    """Split comma-separated amenities, trimming and dropping empty entries."""
    return tuple(part.strip() for part in text.split(",") if part.strip())


def placeholder_image_url(name: str) -> str:
    """Deterministic placeholder image for a venue name."""
    return PLACEHOLDER_IMAGE_TEMPLATE.format(seed=quote(name, safe=""))


def _whole_number(field_name: str, value: object) -> int:
    """Parse an integer field, rejecting booleans and fractional values."""
    if isinstance(value, bool):
        raise TypeError(f"{field_name} must be a whole number, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field_name} must be a whole number, got {value!r}")
        return int(value)
    return int(value)  # type: ignore[call-overload]


def _text(field_name: str, value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string, got {type(value).__name__}")
    return value.strip()


def _normalize_keywords(keywords: str) -> str:
    return " ".join(keywords.lower().split())


class VenueForm:
    """Editable fields for a new or existing venue."""

    def __init__(
        self,
        description_generator: DescriptionPort,
        *,
        venue_id: str | None = None,
        name: str = "",
        location: str = "",
        capacity: int = DEFAULT_CAPACITY,
        price_per_day: float = DEFAULT_PRICE_PER_DAY,
        amenities: str = "",
        description: str = "",
        image_url: str = "",
    ):
        self.description_generator = description_generator
        self.venue_id = venue_id
        self.name = name
        self.location = location
        self.capacity = capacity
        self.price_per_day = price_per_day
        self.amenities = amenities
        self.description = description
        self.image_url = image_url
        self.keywords = ""
        self.is_open = True
        self._pending: asyncio.Task[bool] | None = None

    @classmethod
    def for_venue(cls, description_generator: DescriptionPort, venue: Venue) -> "VenueForm":
        """Pre-fill a form for editing an existing venue."""
        return cls(
            description_generator,
            venue_id=venue.id,
            name=venue.name,
            location=venue.location,
            capacity=venue.capacity,
            price_per_day=venue.price_per_day,
            amenities=", ".join(venue.amenities),
            description=venue.description,
            image_url=venue.image_url,
        )

    @property
    def is_editing(self) -> bool:
        return self.venue_id is not None

    @property
    def is_generating(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def request_description(self, keywords: str | None = None) -> "asyncio.Task[bool]":
        """Start generating a description for the current keywords.

        Must be called from within a running event loop. Any request still
        in flight is cancelled.

        Args:
            keywords: New keywords to set before requesting. Defaults to
                the form's current keywords.

        Returns:
            The background task. It resolves to True if the suggestion was
            applied to the description field, False if it was discarded.
        """
        if keywords is not None:
            self.keywords = keywords
        self._cancel_pending()
        self._pending = asyncio.create_task(self._generate(self.keywords))
        return self._pending

    async def _generate(self, requested: str) -> bool:
        text = await self.description_generator.generate_description(requested)

        if not self.is_open:
            logger.debug("Discarded description suggestion for closed form")
            return False
        if _normalize_keywords(self.keywords) != _normalize_keywords(requested):
            logger.debug(
                "Discarded stale description suggestion",
                extra={"requested": requested, "current": self.keywords},
            )
            return False
        if not text:
            return False

        self.description = text
        return True

    def _cancel_pending(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    def close(self) -> None:
        """Close the form, cancelling any in-flight suggestion."""
        self.is_open = False
        self._cancel_pending()

    def to_draft(self) -> VenueDraft:
        """Validate the form fields.

        Raises:
            ValueError: If name or location is blank, capacity is not a
                whole number of at least 1, or price is negative or not
                finite.
            TypeError: If a text field is not a string or a number field
                is a boolean.
        """
        if isinstance(self.price_per_day, bool):
            raise TypeError(f"price_per_day must be a number, got {self.price_per_day!r}")
        name = _text("name", self.name)
        return VenueDraft(
            name=name,
            location=_text("location", self.location),
            capacity=_whole_number("capacity", self.capacity),
            price_per_day=float(self.price_per_day),
            description=_text("description", self.description),
            image_url=_text("image_url", self.image_url) or placeholder_image_url(name),
            amenities=parse_amenities(_text("amenities", self.amenities)),
        )

    def submit(self, booking: BookingPort) -> Venue | None:
        """Create or update the venue, then close the form.

        Returns:
            The saved venue, or None if the edited venue no longer exists.

        Raises:
            ValueError: If validation fails. The form stays open.
        """
        draft = self.to_draft()
        if self.is_editing:
            assert self.venue_id is not None
            venue = booking.update_venue(self.venue_id, draft)
        else:
            venue = booking.create_venue(draft)
        self.close()
        return venue
