"""Fake IdGeneratorPort implementation for testing."""

from eventspace.core.ports import IdGeneratorPort


class FakeIdGenerator(IdGeneratorPort):
    """Produces predictable ids: "<prefix>-1", "<prefix>-2", ..."""

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self.issued: list[str] = []

    def new_id(self) -> str:
        new_id = f"{self.prefix}-{len(self.issued) + 1}"
        self.issued.append(new_id)
        return new_id

    def reset(self) -> None:
        self.issued.clear()
