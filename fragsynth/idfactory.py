"""Sequential identifier generation."""

from __future__ import annotations


class IdFactory:
    """Hands out consecutive integer ids starting from a fixed minimum."""

    def __init__(self, minimum: int = 0) -> None:
        self.minimum = minimum
        self._current = minimum

    def next_id(self) -> int:
        """Return the next id and advance the counter."""
        value = self._current
        self._current += 1
        return value

    def reset(self) -> None:
        """Start handing out ids from the minimum again."""
        self._current = self.minimum

    def __repr__(self) -> str:
        return f"IdFactory(minimum={self.minimum}, current={self._current})"