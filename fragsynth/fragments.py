"""Reading brick and linker fragments from mol blocks and their SD appendices."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from fragsynth.atoms import Atom, BrickConnectableAtom, LinkerConnectableAtom
from fragsynth.bond import Bond
from fragsynth.lipinski import Descriptors
from fragsynth.molecule import Molecule, MoleculeKind

_SECTION_MARK = "> <"
_RECORD_END = "$$$$"


class AppendixError(ValueError):
    """Raised when the data items following a mol block cannot be read."""


@dataclass(frozen=True)
class MolBlock:
    """The atoms and bonds of a V2000 mol block.

    Atom symbols are kept in file order; bond atom indices are zero-based.
    """

    title: str
    atoms: tuple[str, ...]
    bonds: tuple[Bond, ...]
    descriptors: Descriptors = field(default_factory=Descriptors)


def _int_field(text: str, what: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"malformed {what}: {text!r}") from None


def parse_mol_block(text: str) -> MolBlock:
    """Parse the header, counts line, atom block and bond block of a mol block."""
    lines = text.splitlines()
    if len(lines) < 4:
        raise ValueError("mol block is missing its counts line")
    counts = lines[3]
    num_atoms = _int_field(counts[0:3], "atom count")
    num_bonds = _int_field(counts[3:6], "bond count")

    atom_lines = lines[4 : 4 + num_atoms]
    bond_lines = lines[4 + num_atoms : 4 + num_atoms + num_bonds]
    if len(atom_lines) < num_atoms or len(bond_lines) < num_bonds:
        raise ValueError("mol block is shorter than its counts line says")

    symbols = []
    for line in atom_lines:
        fields = line.split()
        if len(fields) < 4:
            raise ValueError(f"malformed atom line: {line!r}")
        symbols.append(fields[3])

    bonds = []
    for line in bond_lines:
        origin = _int_field(line[0:3], "bond origin") - 1
        target = _int_field(line[3:6], "bond target") - 1
        order = _int_field(line[6:9], "bond order")
        for index in (origin, target):
            if not 0 <= index < num_atoms:
                raise ValueError(f"bond refers to missing atom {index + 1}")
        bonds.append(Bond(origin, target, order))

    return MolBlock(lines[0], tuple(symbols), tuple(bonds))


def _as_mol_block(mol_block: MolBlock | str) -> MolBlock:
    return mol_block if isinstance(mol_block, MolBlock) else parse_mol_block(mol_block)


def _find_section(lines: list[str], start: int) -> int:
    """Return the index of the first line at or after ``start`` opening a data item."""
    for index in range(start, len(lines)):
        if _SECTION_MARK in lines[index]:
            return index
    raise AppendixError("expected a '> <' data item header")


def _tokens_from(lines: list[str], start: int) -> Iterator[tuple[int, str, str]]:
    """Yield (line index, token, rest of line) for each token from line ``start`` on."""
    for index in range(start, len(lines)):
        line = lines[index]
        position = 0
        for token in line.split():
            position = line.index(token, position) + len(token)
            yield index, token, line[position:]


def parse_brick_appendix(appendix: str, num_atoms: int, owner: Any) -> list[Atom]:
    """Build the atoms of a brick from its atom-type and branch data items.

    Atoms named in the branch item become connectable to the listed types;
    all others are plain atoms.
    """
    lines = appendix.splitlines()
    header = _find_section(lines, 0)

    atom_types: list[str] = []
    current, next_index = "", header + 1
    if num_atoms > 0:
        tokens = _tokens_from(lines, header + 1)
        for index, token, rest in tokens:
            atom_types.append(token)
            if len(atom_types) == num_atoms:
                current, next_index = rest, index + 1
                break
        if len(atom_types) < num_atoms:
            raise AppendixError(f"expected {num_atoms} atom types, found {len(atom_types)}")
    elif next_index < len(lines):
        current, next_index = lines[next_index], next_index + 1

    if _SECTION_MARK not in current:
        next_index = _find_section(lines, next_index) + 1

    connections: list[list[str]] = [[] for _ in range(num_atoms)]
    for line in lines[next_index:]:
        if not line or line[0].isspace() or line.startswith(_RECORD_END):
            break
        atom_field, *allowed = line.split()
        try:
            atom_id = int(atom_field)
        except ValueError:
            raise AppendixError(f"malformed branch atom number: {atom_field!r}") from None
        if not 1 <= atom_id <= num_atoms:
            raise AppendixError(f"branch refers to missing atom {atom_id}")
        connections[atom_id - 1].extend(allowed)

    return [
        BrickConnectableAtom(atom_type, owner, allowed) if allowed else Atom(atom_type)
        for atom_type, allowed in zip(atom_types, connections)
    ]


def parse_linker_appendix(appendix: str, num_atoms: int, owner: Any) -> list[Atom]:
    """Build the atoms of a linker from its (max connections, atom type) pairs."""
    lines = appendix.splitlines()
    header = _find_section(lines, 0)
    tokens = (token for _, token, _ in _tokens_from(lines, header + 1))

    atoms: list[Atom] = []
    for _ in range(num_atoms):
        max_field = next(tokens, None)
        atom_type = next(tokens, None)
        if max_field is None or atom_type is None:
            raise AppendixError(f"expected {num_atoms} linker atoms, found {len(atoms)}")
        try:
            max_connect = int(max_field)
        except ValueError:
            raise AppendixError(f"malformed maximum connections: {max_field!r}") from None
        atoms.append(LinkerConnectableAtom(max_connect, atom_type, owner))
    return atoms


def _make_fragment(
    kind: MoleculeKind, mol_block: MolBlock | str, name: str
) -> tuple[Molecule, MolBlock]:
    block = _as_mol_block(mol_block)
    molecule = Molecule(
        kind=kind,
        name=name,
        bonds=(Bond(b.origin, b.target, b.order) for b in block.bonds),
        descriptors=block.descriptors,
    )
    return molecule, block


def make_brick(mol_block: MolBlock | str, appendix: str, name: str) -> Molecule:
    """Create a brick fragment from its mol block and appendix."""
    molecule, block = _make_fragment(MoleculeKind.BRICK, mol_block, name)
    molecule.atoms = parse_brick_appendix(appendix, len(block.atoms), molecule)
    return molecule


def make_linker(mol_block: MolBlock | str, appendix: str, name: str) -> Molecule:
    """Create a linker fragment from its mol block and appendix."""
    molecule, block = _make_fragment(MoleculeKind.LINKER, mol_block, name)
    molecule.atoms = parse_linker_appendix(appendix, len(block.atoms), molecule)
    return molecule