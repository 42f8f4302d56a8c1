"""Errors raised by model commands."""


class NotFound(KeyError):
    """An id did not resolve to a live entity of the expected kind."""

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(entity_id)
        self.kind = kind
        self.entity_id = entity_id

    def __str__(self) -> str:
        return f"{self.kind} '{self.entity_id}' not found"
