from fragsynth.bond import Bond


def test_fields():
    bond = Bond(2, 5, 1)
    assert (bond.origin, bond.target, bond.order) == (2, 5, 1)


def test_shifted_moves_both_ends_and_keeps_order():
    shifted = Bond(2, 5, 2).shifted(10)
    assert (shifted.origin, shifted.target, shifted.order) == (12, 15, 2)


def test_shift_by_zero_is_equal():
    bond = Bond(3, 4, 1)
    assert bond.shifted(0) == bond


def test_equality_ignores_order():
    assert Bond(1, 2, 1) == Bond(1, 2, 2)
    assert hash(Bond(1, 2, 1)) == hash(Bond(1, 2, 2))


def test_inequality_on_endpoints():
    assert not (Bond(1, 2, 1) == Bond(2, 1, 1))
    assert not (Bond(1, 2, 1) == Bond(1, 3, 1))


def test_str():
    assert str(Bond(0, 7, 1)) == " from atom 0 to atom 7"


def test_comparison_with_other_type_is_false():
    assert (Bond(0, 1, 1) == (0, 1)) is False