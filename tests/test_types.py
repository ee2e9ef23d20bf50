import pytest

from akecs.types import (
    INVALID_ENTITY,
    INVALID_INDEX,
    SIGNATURE_SIZE,
    Entity,
    Signature,
)


def test_default_signature_is_clear():
    sig = Signature()
    assert int(sig) == 0
    assert not any(sig.test(i) for i in range(len(sig)))


def test_signature_length_is_fixed():
    assert len(Signature()) == SIGNATURE_SIZE


def test_set_and_test_round_trip():
    sig = Signature()
    sig.set(3, True)
    assert sig.test(3)
    assert not sig.test(2)
    sig.set(3, False)
    assert not sig.test(3)


def test_set_defaults_to_true():
    sig = Signature()
    sig.set(5)
    assert sig.test(5)


def test_reset_clears_all_bits():
    sig = Signature()
    for i in (0, 7, SIGNATURE_SIZE - 1):
        sig.set(i, True)
    sig.reset()
    assert sig == Signature()


def test_issubset():
    small = Signature()
    small.set(1)
    big = Signature()
    big.set(1)
    big.set(4)
    assert small.issubset(big)
    assert not big.issubset(small)
    assert Signature().issubset(small)


def test_and_or():
    a = Signature()
    a.set(1)
    b = Signature()
    b.set(2)
    both = a | b
    assert both.test(1) and both.test(2)
    assert (both & a) == a


def test_copy_is_independent():
    a = Signature()
    a.set(0)
    b = a.copy()
    b.set(1)
    assert not a.test(1)
    assert b.test(0)


@pytest.mark.parametrize("position", [-1, SIGNATURE_SIZE])
def test_out_of_range_position(position):
    sig = Signature()
    with pytest.raises(IndexError):
        sig.test(position)
    with pytest.raises(IndexError):
        sig.set(position, True)


def test_bits_too_large():
    with pytest.raises(ValueError):
        Signature(1 << SIGNATURE_SIZE)


def test_default_entity_is_invalid():
    assert Entity() == INVALID_ENTITY
    assert INVALID_ENTITY.index == INVALID_INDEX
    assert INVALID_ENTITY.version == INVALID_INDEX


def test_entity_equality_ignores_signature():
    a = Entity(4, 1)
    b = Entity(4, 1)
    b.signature.set(0)
    assert a == b
    assert hash(a) == hash(b)
    assert Entity(4, 2) != a


def test_entity_ordering():
    entities = [Entity(2, 0), Entity(1, 5), Entity(1, 2)]
    assert sorted(entities) == [Entity(1, 2), Entity(1, 5), Entity(2, 0)]
    assert Entity(1, 5) > Entity(1, 2)


def test_entities_in_set():
    s = {Entity(1, 0), Entity(1, 0), Entity(2, 0)}
    assert len(s) == 2


def test_entity_component_indices_start_invalid():
    e = Entity(0, 0)
    assert len(e.component_index) == SIGNATURE_SIZE
    assert all(i == INVALID_INDEX for i in e.component_index)