"""Sequence entity — a named, persisted counter."""

from dataclasses import dataclass


@dataclass
class Sequence:
    id: int | None
    name: str
    count: int = 0

    def advance(self) -> int:
        """Bump the count by exactly one and return the new value."""
        self.count += 1
        return self.count
