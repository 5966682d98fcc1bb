import pytest

from fragsynth.atoms import Atom, BrickConnectableAtom, LinkerConnectableAtom
from fragsynth.bond import Bond
from fragsynth.constants import LipinskiBounds
from fragsynth.idfactory import IdFactory
from fragsynth.lipinski import Descriptors, estimate_combined
from fragsynth.molecule import (
    Composition,
    FragmentLayout,
    Molecule,
    MoleculeKind,
)
from fragsynth.molfile import write_mol_block


def make_brick(index, descriptors=None):
    brick = Molecule(MoleculeKind.BRICK, name=f"brick{index}", unique_index_id=index,
                     descriptors=descriptors)
    brick.atoms = [Atom("C.3"), BrickConnectableAtom("C.ar", brick, ["N.am"])]
    brick.add_bond(0, 1, 1)
    return brick


def make_linker(index, descriptors=None):
    linker = Molecule(MoleculeKind.LINKER, name=f"linker{index}", unique_index_id=index,
                      descriptors=descriptors)
    linker.atoms = [LinkerConnectableAtom(2, "N.am", linker)]
    return linker


def test_init_fragment_devices_numbers_connection_points():
    layout = FragmentLayout(1, 1)
    brick = make_brick(0)
    factory = IdFactory(100)
    brick.init_fragment_devices(layout, factory)
    assert brick.fragment_counter == [1, 0]
    assert brick.atoms[0].connection_id == -1
    assert brick.atoms[1].connection_id == 100
    linker = make_linker(1)
    linker.init_fragment_devices(layout, factory)
    assert linker.atoms[0].connection_id == 101
    assert linker.fragment_counter == [0, 1]


def test_init_fragment_devices_requires_index():
    molecule = Molecule(MoleculeKind.BRICK)
    with pytest.raises(ValueError):
        molecule.init_fragment_devices(FragmentLayout(1, 0), IdFactory(0))


def test_fragment_count_requires_counter():
    with pytest.raises(ValueError):
        Molecule().fragment_count()


def test_compose_brick_with_linker():
    layout = FragmentLayout(1, 1)
    brick = make_brick(0, Descriptors(100.0, 1.0, 2.0, 0.5))
    linker = make_linker(1, Descriptors(50.0, 0.0, 1.0, 0.2))
    brick.init_fragment_devices(layout, IdFactory(100))
    linker.init_fragment_devices(layout, IdFactory(200))

    results = brick.compose(linker, layout)
    assert len(results) == 1
    result = results[0]
    assert isinstance(result, Composition)
    assert result.antecedents == (0, 1)
    composed = result.molecule
    assert composed.is_complex
    assert len(composed.atoms) == 3
    assert composed.bonds == [Bond(0, 1, 1), Bond(1, 2, 1)]
    assert composed.bonds[-1].order == 1
    assert composed.fragment_counter == [1, 1]
    assert composed.fragment_count() == 2
    assert not composed.atoms[1].space_to_connect()
    assert composed.atoms[2].space_to_connect()
    assert composed.atoms[2].num_external_connections == 1
    assert composed.descriptors == estimate_combined(brick.descriptors, linker.descriptors)
    # originals untouched
    assert brick.atoms[1].num_external_connections == 0
    assert linker.atoms[0].num_external_connections == 0


def test_compose_linker_with_brick_places_linker_first():
    layout = FragmentLayout(1, 1)
    brick = make_brick(0)
    linker = make_linker(1)
    brick.init_fragment_devices(layout, IdFactory(0))
    linker.init_fragment_devices(layout, IdFactory(10))
    results = linker.compose(brick, layout)
    assert len(results) == 1
    assert results[0].antecedents == (1, 0)
    assert results[0].molecule.bonds == [Bond(1, 2, 1), Bond(0, 2, 1)]


def test_compose_incompatible_gives_nothing():
    layout = FragmentLayout(2, 0)
    first = make_brick(0)
    second = make_brick(1)
    first.init_fragment_devices(layout, IdFactory(0))
    second.init_fragment_devices(layout, IdFactory(10))
    assert first.compose(second, layout) == []


def test_compose_respects_lipinski_bounds():
    layout = FragmentLayout(1, 1)
    heavy = Descriptors(molwt=1000.0)
    brick = make_brick(0, heavy)
    linker = make_linker(1, heavy)
    brick.init_fragment_devices(layout, IdFactory(0))
    linker.init_fragment_devices(layout, IdFactory(10))
    assert brick.compose(linker, layout, use_lipinski=True,
                         bounds=LipinskiBounds()) == []
    assert len(brick.compose(linker, layout, use_lipinski=False)) == 1


def test_linker_brick_counts_after_two_compositions():
    layout = FragmentLayout(2, 1)
    first = make_brick(0)
    second = make_brick(1)
    linker = make_linker(2)
    factory = IdFactory(0)
    for molecule in (first, second, linker):
        molecule.init_fragment_devices(layout, factory)

    composed = first.compose(linker, layout)[0].molecule
    assert composed.linker_brick_counts(layout) == (1, 1, 1, 1)

    bigger = composed.compose(second, layout)
    assert len(bigger) == 1
    molecule = bigger[0].molecule
    assert molecule.linker_brick_counts(layout) == (1, 1, 2, 2)
    assert molecule.fragment_count() == 3
    assert len(molecule.atoms) == 5
    assert len(molecule.bonds) == 4


def test_to_mol_block_matches_writer():
    brick = make_brick(0)
    block = brick.to_mol_block()
    assert block == write_mol_block(brick.atoms, brick.bonds)
    assert block.endswith("M  END")


def test_str_of_brick():
    brick = make_brick(0)
    text = str(brick)
    assert text.startswith("Molecule: 0  is a rigid.There are 2 atoms, and 1 bonds.\n")
    assert "Atoms:\n" in text
    assert "Bonds:\n\t from atom 0 to atom 1\n" in text


def test_str_of_linker_and_complex():
    layout = FragmentLayout(1, 1)
    brick = make_brick(0)
    linker = make_linker(1)
    brick.init_fragment_devices(layout, IdFactory(0))
    linker.init_fragment_devices(layout, IdFactory(10))
    assert str(linker).startswith("Molecule: 1  is a linker.")
    composed = brick.compose(linker, layout)[0].molecule
    assert "There are 1 rigids, and 1 linkers.\n" in str(composed)
    assert "There are 3 atoms, and 2 bonds.\n" in str(composed)


def test_layout_ranges():
    layout = FragmentLayout(3, 2)
    assert layout.num_unique_fragments == 5
    assert list(layout.brick_indices) == [0, 1, 2]
    assert list(layout.linker_indices) == [3, 4]