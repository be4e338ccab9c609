"""Unit tests for venue form state and background description suggestions."""

import asyncio
from datetime import date

import pytest

from eventspace.core.booking_service import BookingService
from eventspace.core.calendar import CalendarEngine
from eventspace.core.models import Booking, Venue
from eventspace.core.venue_form import (
    VenueForm,
    parse_amenities,
    placeholder_image_url,
)
from eventspace.core.venue_store import VenueStore
from eventspace.tests.fakes import FakeClock, FakeDescriptionPort, FakeIdGenerator


@pytest.fixture
def description() -> FakeDescriptionPort:
    return FakeDescriptionPort()


@pytest.fixture
def service(description: FakeDescriptionPort) -> BookingService:
    ids = FakeIdGenerator()
    return BookingService(
        store=VenueStore(ids),
        calendar=CalendarEngine(FakeClock()),
        id_generator=ids,
        description_generator=description,
    )


@pytest.fixture
def form(description: FakeDescriptionPort) -> VenueForm:
    """A filled-in form for a new venue."""
    form = VenueForm(description)
    form.name = "Sky Loft"
    form.location = "Midtown"
    form.amenities = "Wi-Fi, , Bar ,Terrace,"
    return form


class TestFieldHelpers:
    """Test amenities parsing and image placeholders."""

    def test_parse_amenities_trims_and_drops_empty(self) -> None:
        assert parse_amenities(" Wi-Fi, , Bar ,Terrace,") == ("Wi-Fi", "Bar", "Terrace")

    def test_parse_amenities_empty(self) -> None:
        assert parse_amenities("") == ()
        assert parse_amenities(" , ,") == ()

    def test_placeholder_is_deterministic(self) -> None:
        assert placeholder_image_url("Sky Loft") == "https://picsum.photos/seed/Sky%20Loft/800/600"
        assert placeholder_image_url("Sky Loft") == placeholder_image_url("Sky Loft")


class TestDraft:
    """Test converting form fields into a VenueDraft."""

    def test_defaults(self, description: FakeDescriptionPort) -> None:
        form = VenueForm(description)
        assert form.capacity == 10
        assert form.price_per_day == 100
        assert not form.is_editing

    def test_to_draft(self, form: VenueForm) -> None:
        draft = form.to_draft()

        assert draft.name == "Sky Loft"
        assert draft.amenities == ("Wi-Fi", "Bar", "Terrace")
        assert draft.image_url == placeholder_image_url("Sky Loft")

    def test_explicit_image_is_kept(self, form: VenueForm) -> None:
        form.image_url = " https://example.com/loft.jpg "
        assert form.to_draft().image_url == "https://example.com/loft.jpg"

    def test_blank_name_is_rejected(self, form: VenueForm) -> None:
        form.name = "   "
        with pytest.raises(ValueError, match="name"):
            form.to_draft()

    def test_negative_price_is_rejected(self, form: VenueForm) -> None:
        form.price_per_day = -5
        with pytest.raises(ValueError, match="price_per_day"):
            form.to_draft()

    @pytest.mark.parametrize("capacity,expected", [(12, 12), (12.0, 12), ("12", 12)])
    def test_whole_number_capacity(
        self, form: VenueForm, capacity: object, expected: int
    ) -> None:
        form.capacity = capacity  # type: ignore[assignment]
        assert form.to_draft().capacity == expected

    @pytest.mark.parametrize("capacity", [2.9, "2.9", float("nan")])
    def test_fractional_capacity_is_rejected(self, form: VenueForm, capacity: object) -> None:
        form.capacity = capacity  # type: ignore[assignment]
        with pytest.raises(ValueError):
            form.to_draft()

    def test_boolean_numbers_are_rejected(self, form: VenueForm) -> None:
        form.capacity = True
        with pytest.raises(TypeError, match="capacity"):
            form.to_draft()

        form.capacity = 10
        form.price_per_day = False
        with pytest.raises(TypeError, match="price_per_day"):
            form.to_draft()

    def test_non_finite_price_is_rejected(self, form: VenueForm) -> None:
        form.price_per_day = float("inf")
        with pytest.raises(ValueError, match="finite"):
            form.to_draft()

    def test_non_string_text_field_is_rejected(self, form: VenueForm) -> None:
        form.name = 42  # type: ignore[assignment]
        with pytest.raises(TypeError, match="name must be a string"):
            form.to_draft()

    def test_for_venue_prefills(self, description: FakeDescriptionPort) -> None:
        venue = Venue(
            id="v-1",
            name="Modern Loft",
            location="Arts District",
            capacity=75,
            price_per_day=800,
            description="Industrial-chic.",
            image_url="https://picsum.photos/seed/loft/800/600",
            amenities=["Wi-Fi", "Kitchenette"],
        )

        form = VenueForm.for_venue(description, venue)

        assert form.is_editing
        assert form.venue_id == "v-1"
        assert form.amenities == "Wi-Fi, Kitchenette"
        assert form.to_draft().amenities == ("Wi-Fi", "Kitchenette")


class TestSubmit:
    """Test create and edit submission."""

    def test_submit_creates_and_closes(self, form: VenueForm, service: BookingService) -> None:
        venue = form.submit(service)

        assert venue is not None
        assert service.selected_venue() is venue
        assert not form.is_open

    def test_submit_edit_preserves_bookings(
        self, form: VenueForm, service: BookingService, description: FakeDescriptionPort
    ) -> None:
        venue = form.submit(service)
        assert venue is not None
        venue.add_booking(Booking(id="b-1", date=date(2026, 12, 1)))

        edit = VenueForm.for_venue(description, venue)
        edit.capacity = 40
        updated = edit.submit(service)

        assert updated is venue
        assert updated.capacity == 40
        assert [b.id for b in updated.bookings] == ["b-1"]

    def test_invalid_submit_keeps_form_open(
        self, form: VenueForm, service: BookingService
    ) -> None:
        form.location = ""
        with pytest.raises(ValueError):
            form.submit(service)
        assert form.is_open
        assert service.list_venues() == []


class TestDescriptionSuggestion:
    """Test the background description task."""

    @pytest.mark.asyncio
    async def test_result_is_applied(self, form: VenueForm, description: FakeDescriptionPort) -> None:
        applied = await form.request_description("rooftop, skyline")

        assert applied is True
        assert form.description == "Description for rooftop, skyline"
        assert description.generate_calls == ["rooftop, skyline"]

    @pytest.mark.asyncio
    async def test_is_generating_while_in_flight(
        self, form: VenueForm, description: FakeDescriptionPort
    ) -> None:
        description.hold()
        task = form.request_description("rooftop")
        await asyncio.sleep(0)

        assert form.is_generating

        description.release()
        await task
        assert not form.is_generating

    @pytest.mark.asyncio
    async def test_changed_keywords_discard_result(
        self, form: VenueForm, description: FakeDescriptionPort
    ) -> None:
        form.description = "Typed by hand"
        description.hold()
        task = form.request_description("rooftop")
        await asyncio.sleep(0)

        form.keywords = "basement"
        description.release()

        assert await task is False
        assert form.description == "Typed by hand"

    @pytest.mark.asyncio
    async def test_whitespace_only_keyword_changes_still_apply(
        self, form: VenueForm, description: FakeDescriptionPort
    ) -> None:
        description.hold()
        task = form.request_description("rooftop,  skyline")
        await asyncio.sleep(0)

        form.keywords = "Rooftop, skyline "
        description.release()

        assert await task is True
        assert form.description == "Description for rooftop,  skyline"

    @pytest.mark.asyncio
    async def test_new_request_cancels_previous(
        self, form: VenueForm, description: FakeDescriptionPort
    ) -> None:
        description.hold()
        first = form.request_description("rooftop")
        second = form.request_description("garden")
        description.release()

        assert await second is True
        with pytest.raises(asyncio.CancelledError):
            await first
        assert form.description == "Description for garden"

    @pytest.mark.asyncio
    async def test_close_cancels_in_flight_request(
        self, form: VenueForm, description: FakeDescriptionPort
    ) -> None:
        form.description = "Original"
        description.hold()
        task = form.request_description("rooftop")

        form.close()
        description.release()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert not form.is_generating
        assert form.description == "Original"

    @pytest.mark.asyncio
    async def test_error_string_is_applied(
        self, form: VenueForm, description: FakeDescriptionPort
    ) -> None:
        description.set_should_fail(True)
        assert await form.request_description("rooftop") is True
        assert form.description.startswith("Error:")

    @pytest.mark.asyncio
    async def test_blank_keywords_keep_description(self, form: VenueForm) -> None:
        form.description = "Existing"
        assert await form.request_description("   ") is False
        assert form.description == "Existing"
