"""Reading brick and linker SD files into a fragment library, and the command entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from fragsynth.constants import DEBUG_OUTPUT, LIPINSKI_DESCRIPTORS_ONLY
from fragsynth.fragments import make_brick, make_linker
from fragsynth.lipinski import is_compliant
from fragsynth.molecule import Molecule

LOG_FILE_NAME = "synth_log_initial_fragments_logfile.txt"

_USAGE = "Usage: fragsynth [SDF-file-list]"
_LINKER_PREFIX = "l"
_BRICK_PREFIXES = ("r", "b")


@dataclass(frozen=True)
class SdfRecord:
    """One SD record split into its mol block and the data items that follow it.

    ``name`` is the most recent ``#`` header line seen in the file, or None
    when the file has had none so far.
    """

    name: str | None
    mol_block: str
    appendix: str


@dataclass
class FragmentLibrary:
    """The bricks and linkers read from the input files."""

    bricks: list[Molecule] = field(default_factory=list)
    linkers: list[Molecule] = field(default_factory=list)
    log_path: Path | None = field(default_factory=lambda: Path(LOG_FILE_NAME))

    def add(self, kind: str, molecule: Molecule) -> bool:
        """File ``molecule`` by its file-prefix letter; return whether it was kept."""
        if kind == _LINKER_PREFIX:
            self.linkers.append(molecule)
            return True
        if kind in _BRICK_PREFIXES:
            self.bricks.append(molecule)
            return True
        print(
            f"Unrecognized file prefix: {kind}Expected: l->linker, b->brick",
            file=sys.stderr,
        )
        return False


def _next_nonblank(lines: Iterator[str]) -> str | None:
    for line in lines:
        if line.strip():
            return line
    return None


def split_molecules(stream: TextIO) -> Iterator[SdfRecord]:
    """Yield the records of an SD stream.

    The mol block runs up to the first line containing ``END``; the appendix
    runs from there up to and including the line containing ``$$$$``.
    """
    lines = iter(stream.read().splitlines())
    name: str | None = None
    while True:
        line = _next_nonblank(lines)
        if line is None:
            return
        if line.startswith("#"):
            name = line
            line = _next_nonblank(lines)
            if line is None:
                return

        prefix = [line]
        while "END" not in line:
            following = next(lines, None)
            if following is None:
                raise ValueError("mol block ends before its END line")
            line = following
            prefix.append(line)

        suffix: list[str] = []
        while "$$$$" not in line:
            following = next(lines, None)
            if following is None:
                break
            line = following
            suffix.append(line)

        yield SdfRecord(
            name,
            "\n".join(prefix) + "\n",
            "".join(f"{entry}\n" for entry in suffix),
        )


def _file_kind(path: Path) -> str:
    return path.name[:1].lower()


def _log_descriptors(log_path: Path, file_name: str, molecule: Molecule) -> None:
    d = molecule.descriptors
    with log_path.open("a", encoding="utf-8") as log:
        log.write(
            f"{file_name}\nMolWt = {d.molwt:g}\n"
            f"HBD = {d.hbd:g}\n"
            f"HBA1 = {d.hba1:g}\n"
            f"logP = {d.logp:g}\n\n"
        )


def read_molecule_file(path: str | Path, library: FragmentLibrary) -> list[Molecule]:
    """Read every record of an SD file into ``library``; return the molecules read.

    Files whose name starts with ``l`` hold linkers; all others are read as bricks,
    but only those starting with ``r`` or ``b`` are added to the library.
    """
    path = Path(path)
    file_name = str(path)
    kind = _file_kind(path)
    make = make_linker if kind == _LINKER_PREFIX else make_brick
    default_name = f"####   {file_name}    ####"

    molecules: list[Molecule] = []
    with path.open(encoding="utf-8") as stream:
        for record in split_molecules(stream):
            name = record.name if record.name is not None else default_name
            if DEBUG_OUTPUT:
                print(f"Name: \n{name}", file=sys.stderr)
                print(f"Prefix: \n{record.mol_block}", file=sys.stderr)
                print(f"Suffix: \n{record.appendix}", file=sys.stderr)

            molecule = make(record.mol_block, record.appendix, name)

            if is_compliant(molecule.descriptors):
                if library.log_path is not None:
                    _log_descriptors(library.log_path, file_name, molecule)
            else:
                print("Main: predictLipinski failed somehow!", file=sys.stderr)

            library.add(kind, molecule)
            molecules.append(molecule)
    return molecules


def read_input_files(paths: Iterable[str | Path]) -> FragmentLibrary:
    """Read all input files into a new library.

    Raises ValueError for a file whose name does not start with l, r or b.
    """
    library = FragmentLibrary()
    for entry in paths:
        path = Path(entry)
        kind = _file_kind(path)
        if kind != _LINKER_PREFIX and kind not in _BRICK_PREFIXES:
            raise ValueError(
                f"Unexpected file prefix: '{path.name[:1]}' with file {entry}"
            )
        read_molecule_file(path, library)
    return library


def main(argv: list[str] | None = None) -> int:
    """Read the fragment files named on the command line and report what was read."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(_USAGE, file=sys.stderr)
        return 1

    parser = argparse.ArgumentParser(prog="fragsynth", usage=_USAGE)
    parser.add_argument("files", nargs="+")
    options = parser.parse_args(args)

    try:
        library = read_input_files(options.files)
    except (ValueError, OSError) as error:
        print(error, file=sys.stderr)
        print("Did not read input files")
        return 1

    if LIPINSKI_DESCRIPTORS_ONLY:
        print(
            "Calculated Lipinski Descriptors for input fragments, now exiting early."
        )
        return 0

    print(f"Read {len(library.bricks)} bricks and {len(library.linkers)} linkers.")
    return 0


if __name__ == "__main__":
    sys.exit(main())