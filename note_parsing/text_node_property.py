"""Dataclass representing a property attached to a text node."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TextNodeProperty:
    """A name/value pair for a node of the corpus tree.

    ``type`` tags non-textual values (``"integer"``); it is None for text.
    """
    node_id: int
    name: str
    value: str
    type: str | None = None

    def __post_init__(self):
        if isinstance(self.node_id, bool) or not isinstance(self.node_id, int):
            raise ValueError(f"node_id must be an integer, got {self.node_id!r}")
        if self.node_id < 0:
            raise ValueError(f"node_id must not be negative, got {self.node_id}")
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("name must be a non-empty string")
        if not isinstance(self.value, str):
            raise ValueError(f"value of {self.name} must be a string, got {self.value!r}")

    def __str__(self) -> str:
        value = self.value if len(self.value) <= 60 else self.value[:60]
        return f"{self.name}={value} (#{self.node_id})"
