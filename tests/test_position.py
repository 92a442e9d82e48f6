import cbor2
import pytest
from hypothesis import given
from hypothesis import strategies as st

from zewif.position import NonHardenedChildIndex, Position

u32 = st.integers(min_value=0, max_value=2**32 - 1)


@given(u32)
def test_position_cbor_round_trip(v):
    pos = Position(v)
    assert Position.from_cbor(pos.to_cbor()) == pos


@given(u32)
def test_child_index_cbor_round_trip(v):
    idx = NonHardenedChildIndex(v)
    assert NonHardenedChildIndex.from_cbor(idx.to_cbor()) == idx


@given(u32)
def test_int_conversion(v):
    assert int(Position(v)) == v
    assert int(NonHardenedChildIndex(v)) == v


def test_child_index_42():
    index = NonHardenedChildIndex(42)
    assert int(index) == 42


def test_position_default_is_zero():
    assert int(Position()) == 0
    assert Position() == Position(0)


def test_cbor_wire_form_is_plain_uint():
    assert Position(0).to_cbor() == b"\x00"
    assert cbor2.loads(Position(1000).to_cbor()) == 1000


def test_repr():
    assert repr(Position(7)) == "Position(7)"


def test_hashable_and_equal():
    assert len({Position(3), Position(3), Position(4)}) == 2


@pytest.mark.parametrize("cls", [Position, NonHardenedChildIndex])
@pytest.mark.parametrize("bad", [-1, 2**32])
def test_out_of_range_rejected(cls, bad):
    with pytest.raises(ValueError):
        cls(bad)


@pytest.mark.parametrize("cls", [Position, NonHardenedChildIndex])
def test_non_integer_rejected(cls):
    with pytest.raises(TypeError):
        cls("5")


@pytest.mark.parametrize("cls", [Position, NonHardenedChildIndex])
@pytest.mark.parametrize("payload", ["text", -5, 2**40, True, 1.5])
def test_from_cbor_rejects_non_u32(cls, payload):
    with pytest.raises(ValueError):
        cls.from_cbor(cbor2.dumps(payload))