"""Bonds between atoms, addressed by zero-based atom index."""

from __future__ import annotations


class Bond:
    """A bond from one atom index to another with a bond order."""

    __slots__ = ("origin", "target", "order")

    def __init__(self, origin: int, target: int, order: int) -> None:
        self.origin = origin
        self.target = target
        self.order = order

    def shifted(self, offset: int) -> Bond:
        """Return a copy with both atom indices moved by ``offset``."""
        return Bond(self.origin + offset, self.target + offset, self.order)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bond):
            return NotImplemented
        return self.origin == other.origin and self.target == other.target

    def __hash__(self) -> int:
        return hash((self.origin, self.target))

    def __str__(self) -> str:
        return f" from atom {self.origin} to atom {self.target}"

    def __repr__(self) -> str:
        return f"Bond(origin={self.origin}, target={self.target}, order={self.order})"