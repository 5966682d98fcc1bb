import pytest

from fragsynth.idfactory import IdFactory


def test_default_starts_at_zero():
    factory = IdFactory()
    assert [factory.next_id() for _ in range(3)] == [0, 1, 2]


def test_dictated_minimum():
    factory = IdFactory(100)
    assert factory.minimum == 100
    assert factory.next_id() == 100
    assert factory.next_id() == 101


def test_reset_returns_to_minimum():
    factory = IdFactory(7)
    for _ in range(5):
        factory.next_id()
    factory.reset()
    assert factory.next_id() == 7


@pytest.mark.parametrize("start", [0, 3, 100])
def test_ids_are_consecutive(start):
    factory = IdFactory(start)
    ids = [factory.next_id() for _ in range(10)]
    assert ids == list(range(start, start + 10))