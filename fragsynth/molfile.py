"""Writing molecules as MDL mol blocks with zeroed coordinates."""

from __future__ import annotations

from collections.abc import Iterable

from fragsynth.atoms import Atom
from fragsynth.bond import Bond

_HEADER = "z_1.pdb\n OpenBabel05191412593D\n\n"
_FOOTER = "M  END"
_ZERO_COORD = "0.0000"


def _counts_line(num_atoms: int, num_bonds: int) -> str:
    fields = [num_atoms, num_bonds] + [0] * 7
    return "".join(f"{value:>3}" for value in fields) + f"{'0999':>6}{'V2000':>6}\n"


def _atom_line(atom: Atom) -> str:
    coords = _ZERO_COORD.rjust(10) * 3
    symbol = atom.atom_type.symbol().ljust(2)
    return f"{coords} {symbol}" + f"{0:>3}" * 12 + "\n"


def _bond_line(bond: Bond) -> str:
    fields = [bond.origin + 1, bond.target + 1, bond.order] + [0] * 4
    return "".join(f"{value:>3}" for value in fields) + "\n"


def write_mol_block(atoms: Iterable[Atom], bonds: Iterable[Bond]) -> str:
    """Return a V2000 mol block for the atoms and bonds, without a trailing newline."""
    atom_list = list(atoms)
    bond_list = list(bonds)
    parts = [_HEADER, _counts_line(len(atom_list), len(bond_list))]
    parts.extend(_atom_line(atom) for atom in atom_list)
    parts.extend(_bond_line(bond) for bond in bond_list)
    parts.append(_FOOTER)
    return "".join(parts)