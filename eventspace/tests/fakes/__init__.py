"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeClock: Fixed, adjustable "today"
- FakeIdGenerator: Predictable sequential ids
- FakeDescriptionPort: Canned descriptions with call capture and gating
"""

from .clock import FakeClock
from .description import FakeDescriptionPort
from .ids import FakeIdGenerator

__all__ = [
    "FakeClock",
    "FakeDescriptionPort",
    "FakeIdGenerator",
]
