"""Molecules built from brick and linker fragments, and their composition."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from fragsynth.atoms import Atom, construct_atom
from fragsynth.bond import Bond
from fragsynth.constants import DEFAULT_BOUNDS, LipinskiBounds
from fragsynth.idfactory import IdFactory
from fragsynth.lipinski import (
    Descriptors,
    estimate_combined,
    will_exceed_additive_thresholds,
)
from fragsynth.molfile import write_mol_block

# Connection points of all fragments share one id space, starting at 100.
CONNECTION_IDS = IdFactory(100)


class MoleculeKind(enum.Enum):
    BRICK = 0
    LINKER = 1
    COMPLEX = 2


@dataclass(frozen=True)
class FragmentLayout:
    """How the unique fragments are laid out in a fragment counter.

    Bricks take the first ``num_bricks`` slots, linkers the slots after them.
    """

    num_bricks: int
    num_linkers: int
    base_molecules: tuple = field(default=(), compare=False)

    @property
    def num_unique_fragments(self) -> int:
        return self.num_bricks + self.num_linkers

    @property
    def brick_indices(self) -> range:
        return range(0, self.num_bricks)

    @property
    def linker_indices(self) -> range:
        return range(self.num_bricks, self.num_bricks + self.num_linkers)


@dataclass(frozen=True)
class Composition:
    """A molecule made from two others, with the ids of the two it came from."""

    antecedents: tuple[int | None, int | None]
    molecule: Molecule


class Molecule:
    """A molecule as a list of atoms and bonds plus fragment bookkeeping."""

    def __init__(
        self,
        kind: MoleculeKind = MoleculeKind.COMPLEX,
        name: str = "",
        atoms: Iterable[Atom] | None = None,
        bonds: Iterable[Bond] | None = None,
        descriptors: Descriptors | None = None,
        unique_index_id: int | None = None,
    ) -> None:
        self.kind = kind
        self.name = name
        self.atoms: list[Atom] = list(atoms) if atoms is not None else []
        self.bonds: list[Bond] = list(bonds) if bonds is not None else []
        self.descriptors = descriptors if descriptors is not None else Descriptors()
        self.unique_index_id = unique_index_id
        self.fragment_counter: list[int] | None = None
        self.layout: FragmentLayout | None = None

    @property
    def is_linker(self) -> bool:
        return self.kind is MoleculeKind.LINKER

    @property
    def is_brick(self) -> bool:
        return self.kind is MoleculeKind.BRICK

    @property
    def is_complex(self) -> bool:
        return self.kind is MoleculeKind.COMPLEX

    def add_bond(self, origin: int, target: int, order: int) -> None:
        """Append a bond between two atom indices."""
        self.bonds.append(Bond(origin, target, order))

    def init_fragment_devices(
        self, layout: FragmentLayout, id_factory: IdFactory = CONNECTION_IDS
    ) -> None:
        """Mark this fragment in its own counter and number its connection points."""
        if self.unique_index_id is None:
            raise ValueError("the molecule has no unique index id")
        self.layout = layout
        if self.fragment_counter is None:
            self.fragment_counter = [0] * layout.num_unique_fragments
        self.fragment_counter[self.unique_index_id] = 1
        for atom in self.atoms:
            if atom.max_connect > 0:
                atom.connection_id = id_factory.next_id()

    def _counter(self) -> list[int]:
        if self.fragment_counter is None:
            raise ValueError("the fragment counter has not been initialised")
        return self.fragment_counter

    def fragment_count(self) -> int:
        """Return the total number of fragments in the molecule."""
        return sum(self._counter())

    def linker_brick_counts(self, layout: FragmentLayout) -> tuple[int, int, int, int]:
        """Return (linkers, unique linkers, bricks, unique bricks)."""
        counter = self._counter()
        bricks = [counter[i] for i in layout.brick_indices if counter[i]]
        linkers = [counter[i] for i in layout.linker_indices if counter[i]]
        return sum(linkers), len(linkers), sum(bricks), len(bricks)

    def compose(
        self,
        other: Molecule,
        layout: FragmentLayout,
        use_lipinski: bool = False,
        bounds: LipinskiBounds = DEFAULT_BOUNDS,
    ) -> list[Composition]:
        """Return every molecule made by one new bond between this and ``other``."""
        if use_lipinski and will_exceed_additive_thresholds(
            self.descriptors, other.descriptors, bounds
        ):
            return []
        antecedents = (self.unique_index_id, other.unique_index_id)
        offset = len(self.atoms)
        return [
            Composition(
                antecedents, self._compose_local(other, i, offset + j, layout)
            )
            for i, mine in enumerate(self.atoms)
            for j, theirs in enumerate(other.atoms)
            if mine.can_connect_to(theirs)
        ]

    def _compose_local(
        self, other: Molecule, this_index: int, that_index: int, layout: FragmentLayout
    ) -> Molecule:
        mine, theirs = self._counter(), other._counter()
        combined = Molecule(MoleculeKind.COMPLEX)
        combined.atoms = [construct_atom(a) for a in (*self.atoms, *other.atoms)]
        offset = len(self.atoms)
        combined.bonds = [Bond(b.origin, b.target, b.order) for b in self.bonds]
        combined.bonds.extend(b.shifted(offset) for b in other.bonds)
        combined.bonds.append(Bond(this_index, that_index, 1))
        combined.layout = layout
        combined.fragment_counter = [a + b for a, b in zip(mine, theirs)]
        combined.atoms[this_index].add_external_connection()
        combined.atoms[that_index].add_external_connection()
        combined.descriptors = estimate_combined(self.descriptors, other.descriptors)
        return combined

    def to_mol_block(self) -> str:
        """Return the molecule as a mol block with zeroed coordinates."""
        return write_mol_block(self.atoms, self.bonds)

    def __str__(self) -> str:
        parts = [f"Molecule: {self.unique_index_id} "]
        if self.is_linker:
            parts.append(" is a linker.")
        elif self.is_brick:
            parts.append(" is a rigid.")
        elif self.layout is not None and self.fragment_counter is not None:
            linkers, _, bricks, _ = self.linker_brick_counts(self.layout)
            parts.append(f"There are {bricks} rigids, and {linkers} linkers.\n")
        parts.append(
            f"There are {len(self.atoms)} atoms, and {len(self.bonds)} bonds.\n"
        )
        if self.atoms:
            parts.append("Atoms:\n")
            parts.extend(f"\t{atom}\n" for atom in self.atoms)
        if self.bonds:
            parts.append("Bonds:\n")
            parts.extend(f"\t{bond}\n" for bond in self.bonds)
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"Molecule(kind={self.kind.name}, id={self.unique_index_id}, "
            f"atoms={len(self.atoms)}, bonds={len(self.bonds)})"
        )