"""UUID identifier adapter.

Implements IdGeneratorPort with random UUID4 strings.
"""

import uuid

from eventspace.core.ports import IdGeneratorPort


class UUIDGenerator(IdGeneratorPort):
    """Generates random UUID4 identifiers."""

    def new_id(self) -> str:
        return str(uuid.uuid4())
