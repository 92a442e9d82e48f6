import cbor2
import pytest
from hypothesis import given
from hypothesis import strategies as st

from zewif.parser import ParseError, Parser
from zewif.phgr_proof import COMPRESSED_G1_LEN, PHGR_PROOF_LEN, PHGRProof

point = st.binary(min_size=33, max_size=33)
NAMES = ["g_a", "g_a_prime", "g_b", "g_b_prime", "g_c", "g_c_prime", "g_k", "g_h"]


def distinct_proof():
    return PHGRProof(*(bytes([i]) * 33 for i in range(8)))


def test_zero_proof_is_264_bytes():
    g1 = bytes(33)
    proof = PHGRProof(g1, g1, g1, g1, g1, g1, g1, g1)
    assert len(proof.to_bytes()) == 264
    assert PHGR_PROOF_LEN == 8 * COMPRESSED_G1_LEN


def test_to_bytes_keeps_point_order():
    proof = distinct_proof()
    data = proof.to_bytes()
    for i, name in enumerate(NAMES):
        chunk = data[i * 33 : (i + 1) * 33]
        assert chunk == getattr(proof, name)
        assert chunk == bytes([i]) * 33


def test_parse_reads_exactly_eight_points():
    proof = distinct_proof()
    p = Parser(proof.to_bytes() + b"\xaa\xbb")
    assert PHGRProof.parse(p) == proof
    assert p.remaining() == 2


@given(st.lists(point, min_size=8, max_size=8))
def test_bytes_roundtrip(points):
    proof = PHGRProof(*points)
    assert PHGRProof.from_bytes(proof.to_bytes()) == proof


@given(st.lists(point, min_size=8, max_size=8))
def test_cbor_roundtrip(points):
    proof = PHGRProof(*points)
    assert PHGRProof.from_cbor(proof.to_cbor()) == proof


def test_cbor_carries_type_and_bytes():
    proof = distinct_proof()
    decoded = cbor2.loads(proof.to_cbor())
    assert decoded == {"type": "PHGRProof", "bytes": proof.to_bytes()}


def test_from_bytes_too_short():
    with pytest.raises(ParseError, match="g_h"):
        PHGRProof.from_bytes(bytes(PHGR_PROOF_LEN - 1))


def test_from_bytes_too_long():
    with pytest.raises(ParseError, match="bytes left"):
        PHGRProof.from_bytes(bytes(PHGR_PROOF_LEN + 1))


def test_point_length_checked():
    g1 = bytes(33)
    with pytest.raises(ValueError):
        PHGRProof(bytes(32), g1, g1, g1, g1, g1, g1, g1)


def test_point_type_checked():
    g1 = bytes(33)
    with pytest.raises(TypeError):
        PHGRProof("x" * 33, g1, g1, g1, g1, g1, g1, g1)


def test_from_cbor_wrong_type():
    data = cbor2.dumps({"type": "Other", "bytes": bytes(PHGR_PROOF_LEN)})
    with pytest.raises(ValueError, match="expected type"):
        PHGRProof.from_cbor(data)


def test_from_cbor_not_a_map():
    with pytest.raises(ValueError, match="expected a map"):
        PHGRProof.from_cbor(cbor2.dumps(bytes(PHGR_PROOF_LEN)))


def test_from_cbor_missing_bytes():
    with pytest.raises(ValueError, match="byte string"):
        PHGRProof.from_cbor(cbor2.dumps({"type": "PHGRProof"}))