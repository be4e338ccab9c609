"""Built-in sample venues loaded at startup when enabled in settings."""

from eventspace.core.models import Venue
from eventspace.core.ports import IdGeneratorPort

SAMPLE_VENUES = (
    {
        "name": "The Grand Ballroom",
        "location": "Downtown, Metro City",
        "capacity": 200,
        "amenities": ["Wi-Fi", "Projector", "Catering", "Sound System"],
        "price_per_day": 1500,
        "description": (
            "An elegant and spacious ballroom perfect for weddings, galas, and "
            "large corporate events. Features high ceilings and classic decor."
        ),
        "image_url": "https://picsum.photos/seed/ballroom/800/600",
    },
    {
        "name": "Modern Loft",
        "location": "Arts District, Metro City",
        "capacity": 75,
        "amenities": ["Wi-Fi", "Kitchenette", "Natural Light", "Rooftop Access"],
        "price_per_day": 800,
        "description": (
            "A stylish and versatile loft with an industrial-chic vibe. Ideal "
            "for workshops, photo shoots, and intimate gatherings."
        ),
        "image_url": "https://picsum.photos/seed/loft/800/600",
    },
    {
        "name": "Lakeside Conference Center",
        "location": "North Suburbs",
        "capacity": 120,
        "amenities": ["Wi-Fi", "Whiteboards", "AV Equipment", "Free Parking"],
        "price_per_day": 1100,
        "description": (
            "A professional setting with serene lake views. Our conference "
            "center is equipped with state-of-the-art technology for your next "
            "business meeting."
        ),
        "image_url": "https://picsum.photos/seed/conference/800/600",
    },
)


def sample_venues(id_generator: IdGeneratorPort) -> list[Venue]:
    """Fresh copies of the sample venues with newly generated ids."""
    return [
        Venue(id=id_generator.new_id(), **{**fields, "amenities": list(fields["amenities"])})
        for fields in SAMPLE_VENUES
    ]
