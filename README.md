# fragsynth

fragsynth reads libraries of molecular fragments from SD files and joins
fragments into larger molecules. A fragment is one of two kinds:

* **linkers**: every atom can bond to brick atoms, up to a maximum number
  of external connections given per atom. Linker atoms never bond to
  other linker atoms.
* **bricks**: only the atoms named in the record's branch data can
  connect. Each of them takes one external bond, and only to the atom
  types it lists.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
fragsynth linkers.sdf bricks.sdf
```

The first letter of each file name, in either case, decides what the file
holds: `l` for linkers, `b` or `r` for bricks. If any file name starts
with another letter, the command prints an error and
`Did not read input files`, and exits with status 1. Run with no
arguments, it prints a usage line and exits with status 1.

After reading, it prints how many bricks and linkers were read. For every
fragment whose descriptors are within the Lipinski bounds, it appends the
file name and the descriptor values to
`synth_log_initial_fragments_logfile.txt` in the current directory.

## Input format

Each fragment is one SD record:

1. Optionally, a line starting with `#`. It names the records after it in
   the same file, until the next `#` line. Records in a file with no `#`
   line so far are named `####   <file name>    ####`.
2. A V2000 mol block, up to the first line containing `END`.
3. An appendix of data items, up to and including a line containing `$$$$`.

For a **brick**, the appendix holds two data items, each opened by a line
containing `> <`. The first lists one atom type per atom, in atom order.
The second has one line per connectable atom: its one-based atom number
followed by the atom types it may bond to. It ends at a blank line, a
line starting with whitespace, or `$$$$`.

For a **linker**, the first data item lists, for every atom in order, its
maximum number of external connections followed by its atom type.

Atom types are written `<element>.<qualifier>` with an optional trailing
digit, for example `C.3`, `C.ar`, `N.am` or `O.co`. The elements are
C, Cl, H, N, O, P, S, F, Br, B and I; the qualifiers are `am`, `ar`,
`pl`, `co`, `o` and `cat`, in any case.

## Library use

```python
from fragsynth.atomtype import parse_atom_type

aromatic_carbon = parse_atom_type("C.ar")
print(aromatic_carbon.symbol())   # C
print(aromatic_carbon)            # C.ar
```

An unknown element or qualifier raises `AtomTypeError`.

Reading fragments and joining them:

```python
from pathlib import Path

from fragsynth.cli import read_input_files
from fragsynth.molecule import FragmentLayout

library = read_input_files([Path("linkers.sdf"), Path("bricks.sdf")])
layout = FragmentLayout(num_bricks=len(library.bricks),
                        num_linkers=len(library.linkers))

for index, fragment in enumerate(library.bricks + library.linkers):
    fragment.unique_index_id = index
    fragment.init_fragment_devices(layout)

brick, linker = library.bricks[0], library.linkers[0]
for composition in brick.compose(linker, layout):
    print(composition.antecedents)
    print(composition.molecule.to_mol_block())
```

`Molecule.compose` returns one `Composition` for every pair of atoms,
one from each molecule, that may bond. Each new molecule holds copies of
both atom lists, both bond lists (the second shifted past the first) and
one new single bond. Its fragment counter is the sum of the two, and its
descriptors are estimated from theirs by `lipinski.estimate_combined`.
With `use_lipinski=True`, nothing is returned when
`lipinski.will_exceed_additive_thresholds` says the join would break a
bound in the given `LipinskiBounds`.

`init_fragment_devices` numbers connection points from a shared
`IdFactory` that starts at 100:

```python
from fragsynth.idfactory import IdFactory

ids = IdFactory(100)
ids.next_id()   # 100
ids.next_id()   # 101
ids.reset()     # starts again from 100
```

`fragsynth.threadpool.ThreadPool` runs a function over pushed items on a
fixed number of worker threads (10 by default). Results are read with
`front()` and `pop()`. `close()`, also called when a `with` block ends,
stops the workers and re-raises the first error a worker met.

| Module | Contents |
| --- | --- |
| `fragsynth.constants` | `LipinskiBounds`, `DEFAULT_BOUNDS` and other defaults |
| `fragsynth.idfactory` | `IdFactory` |
| `fragsynth.atomtype` | `Element`, `Special`, `AtomType`, `AtomTypeError`, `parse_atom_type` |
| `fragsynth.bond` | `Bond` |
| `fragsynth.atoms` | `Atom`, `ConnectableAtom`, `BrickConnectableAtom`, `LinkerConnectableAtom`, `AtomError`, `construct_atom` |
| `fragsynth.lipinski` | `Descriptors`, `estimate_combined`, `will_exceed_additive_thresholds`, `is_compliant`, `exceeds_max_estimated_thresholds` |
| `fragsynth.molfile` | `write_mol_block` |
| `fragsynth.molecule` | `Molecule`, `MoleculeKind`, `FragmentLayout`, `Composition` |
| `fragsynth.fragments` | `MolBlock`, `AppendixError`, `parse_mol_block`, `parse_brick_appendix`, `parse_linker_appendix`, `make_brick`, `make_linker` |
| `fragsynth.threadpool` | `ThreadPool` |
| `fragsynth.cli` | `SdfRecord`, `FragmentLibrary`, `split_molecules`, `read_molecule_file`, `read_input_files`, `main` |

## What it does not do

* It does not compute molecular weight, hydrogen-bond donors, acceptors
  or logP from a structure. Fragments read from files have all four
  descriptors set to zero, so every input fragment counts as within the
  bounds and is logged. Only the estimates made when joining molecules
  carry non-zero values.
* It does not run a full synthesis over a library, and it does not
  remove duplicate molecules. The command only reads and reports the
  input fragments.
* It does not compute fingerprints or similarity between fragments.
* It does not write SMILES. `to_mol_block` writes mol blocks with all
  coordinates set to zero.