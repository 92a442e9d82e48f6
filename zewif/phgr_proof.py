"""Sprout-era PHGR zero-knowledge proofs made of eight compressed G1 points."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

import cbor2

from .parser import ParseError, Parser, parse_buf, parse_with_context

__all__ = ["PHGRProof", "COMPRESSED_G1_LEN", "PHGR_PROOF_LEN"]

_TYPE_NAME = "PHGRProof"

COMPRESSED_G1_LEN = 33
"""Size of a compressed G1 point: a format byte followed by a 32-byte field element."""

PHGR_PROOF_LEN = 8 * COMPRESSED_G1_LEN
"""Size of a serialized PHGR proof."""


def _check_point(name: str, value: Any) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
    data = bytes(value)
    if len(data) != COMPRESSED_G1_LEN:
        raise ValueError(
            f"{name} must be {COMPRESSED_G1_LEN} bytes, got {len(data)}"
        )
    return data


def _read_point(p: Parser) -> bytes:
    return p.next(COMPRESSED_G1_LEN)


@dataclass(frozen=True)
class PHGRProof:
    """A PHGR proof: the points A, A', B, B', C, C', K and H, in that order."""

    g_a: bytes
    g_a_prime: bytes
    g_b: bytes
    g_b_prime: bytes
    g_c: bytes
    g_c_prime: bytes
    g_k: bytes
    g_h: bytes

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _check_point(f.name, getattr(self, f.name)))

    def _points(self) -> tuple[bytes, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def to_bytes(self) -> bytes:
        """Concatenate the eight points in proof order."""
        return b"".join(self._points())

    @classmethod
    def parse(cls, p: Parser) -> "PHGRProof":
        """Read eight consecutive compressed G1 points."""
        points = {
            f.name: parse_with_context(p, _read_point, f.name) for f in fields(cls)
        }
        return cls(**points)

    @classmethod
    def from_bytes(cls, data: bytes) -> "PHGRProof":
        """Parse a proof from exactly ``PHGR_PROOF_LEN`` bytes."""
        try:
            return parse_buf(data, cls.parse)
        except ParseError as exc:
            raise ParseError(f"Parsing {_TYPE_NAME}: {exc}") from exc

    def to_cbor(self) -> bytes:
        """Encode as a CBOR map tagged with the type name, holding the proof bytes."""
        return cbor2.dumps({"type": _TYPE_NAME, "bytes": self.to_bytes()})

    @classmethod
    def from_cbor(cls, data: bytes) -> "PHGRProof":
        """Decode from the CBOR map produced by :meth:`to_cbor`."""
        try:
            decoded = cbor2.loads(data)
        except cbor2.CBORDecodeError as exc:
            raise ValueError(f"{_TYPE_NAME}: {exc}") from exc
        if not isinstance(decoded, dict):
            raise ValueError(f"{_TYPE_NAME}: expected a map, got {decoded!r}")
        if decoded.get("type") != _TYPE_NAME:
            raise ValueError(
                f"{_TYPE_NAME}: expected type {_TYPE_NAME!r}, got {decoded.get('type')!r}"
            )
        raw = decoded.get("bytes")
        if not isinstance(raw, bytes):
            raise ValueError(f"{_TYPE_NAME}: bytes: expected a byte string, got {raw!r}")
        return cls.from_bytes(raw)