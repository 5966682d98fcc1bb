"""Atoms of fragments: plain atoms and atoms that can bond to other fragments."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any

from fragsynth.atomtype import AtomType, parse_atom_type


class AtomError(Exception):
    """Raised when an operation makes no sense for the kind of atom it is applied to."""


def _as_atom_type(value: AtomType | str) -> AtomType:
    return value if isinstance(value, AtomType) else parse_atom_type(value)


class Atom:
    """An atom that takes no part in connections between fragments."""

    is_simple = True
    is_connectable = False
    is_linker_atom = False
    is_brick_atom = False
    can_connect_to_any = False

    def __init__(self, atom_type: AtomType | str) -> None:
        self.atom_type = _as_atom_type(atom_type)

    @property
    def connection_id(self) -> int:
        return -1

    @connection_id.setter
    def connection_id(self, value: int) -> None:
        raise AtomError("a simple atom has no connection id")

    @property
    def max_connect(self) -> int:
        return 0

    @property
    def owner(self) -> Any:
        raise AtomError("a simple atom has no owner fragment")

    def space_to_connect(self) -> bool:
        """Return whether another external bond may be made to this atom."""
        return False

    def can_connect_to(self, other: Atom) -> bool:
        """Return whether this atom may bond to ``other``."""
        return False

    def add_external_connection(self) -> None:
        """Record an external bond to this atom."""
        raise AtomError("a simple atom cannot take external connections")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Atom):
            return NotImplemented
        return self.atom_type == other.atom_type

    def __hash__(self) -> int:
        return hash(self.atom_type)

    def __str__(self) -> str:
        return str(self.atom_type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.atom_type)!r})"


class ConnectableAtom(Atom):
    """An atom of a fragment at which bonds to other fragments can be made."""

    is_simple = False
    is_connectable = True

    def __init__(
        self,
        atom_type: AtomType | str,
        owner: Any = None,
        max_connect: int = 0,
        connection_id: int = 0,
    ) -> None:
        super().__init__(atom_type)
        self._owner = owner
        self._max_connect = max_connect
        self._connection_id = connection_id
        self.num_external_connections = 0

    @property
    def connection_id(self) -> int:
        return self._connection_id

    @connection_id.setter
    def connection_id(self, value: int) -> None:
        self._connection_id = value

    @property
    def max_connect(self) -> int:
        return self._max_connect

    @property
    def owner(self) -> Any:
        return self._owner

    @property
    def can_connect_to_any(self) -> bool:  # type: ignore[override]
        raise AtomError("connectability is decided by the linker or brick atom kind")

    @property
    def is_linker_atom(self) -> bool:  # type: ignore[override]
        raise AtomError("atom kind is decided by the linker or brick atom kind")

    def space_to_connect(self) -> bool:
        return self._max_connect > self.num_external_connections

    def can_connect_to(self, other: Atom) -> bool:
        raise AtomError("connectability is decided by the linker or brick atom kind")

    def add_external_connection(self) -> None:
        self.num_external_connections += 1


class BrickConnectableAtom(ConnectableAtom):
    """A brick atom that bonds once, and only to atoms of the allowed types."""

    is_brick_atom = True

    def __init__(
        self,
        atom_type: AtomType | str,
        owner: Any,
        allowable_types: Iterable[AtomType | str],
    ) -> None:
        super().__init__(atom_type, owner, max_connect=1)
        self.allowable_types = tuple(_as_atom_type(t) for t in allowable_types)

    @property
    def can_connect_to_any(self) -> bool:  # type: ignore[override]
        return False

    @property
    def is_linker_atom(self) -> bool:  # type: ignore[override]
        return False

    def can_connect_to(self, other: Atom) -> bool:
        if other.is_simple:
            return False
        if not self.space_to_connect() or not other.space_to_connect():
            return False
        if other.atom_type not in self.allowable_types:
            return False
        if other.can_connect_to_any:
            return True
        if other.is_linker_atom:
            return False
        return self.atom_type in other.allowable_types

    def __str__(self) -> str:
        allowed = "".join(f"{t} " for t in self.allowable_types)
        return (
            f" Connections{{ Max: {self.max_connect} Allow: {allowed}"
            f"  Conn Id: ({self.connection_id}) }}"
        )


class LinkerConnectableAtom(ConnectableAtom):
    """A linker atom that accepts any brick atom allowing its type."""

    is_linker_atom = True  # type: ignore[assignment]
    is_brick_atom = False
    can_connect_to_any = True  # type: ignore[assignment]

    def __init__(self, max_connect: int, atom_type: AtomType | str, owner: Any) -> None:
        super().__init__(atom_type, owner, max_connect=max_connect, connection_id=0)

    def can_connect_to(self, other: Atom) -> bool:
        if other.is_simple:
            return False
        if other.is_linker_atom:
            return False
        if not self.space_to_connect() or not other.space_to_connect():
            return False
        return self.atom_type in other.allowable_types

    def __str__(self) -> str:
        return (
            f" Connections{{ Max: {self.max_connect} Allow: All Conn"
            f"\tNum ExtBonds: ({self.num_external_connections})"
            f"  Conn Id: ({self.connection_id}) }}"
        )


def construct_atom(atom: Atom) -> Atom:
    """Return the smallest independent copy of ``atom``.

    Simple atoms and connectable atoms with no room left become plain atoms;
    linker and brick atoms with room left are copied with their state.
    """
    if atom.is_simple:
        return Atom(atom.atom_type)
    if not atom.space_to_connect():
        return Atom(atom.atom_type)
    if atom.is_linker_atom:
        return copy.copy(atom)
    if atom.is_brick_atom:
        return copy.copy(atom)
    raise AtomError("expected brick or linker atom; neither found")