"""Unsigned 32-bit indices: note commitment tree positions and non-hardened child indices."""

from __future__ import annotations

from dataclasses import dataclass

import cbor2

__all__ = ["Position", "NonHardenedChildIndex"]

_U32_MAX = 0xFFFF_FFFF


def _check_u32(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} requires an integer, got {type(value).__name__}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} value out of range for u32: {value}")


def _decode_u32(name: str, data: bytes) -> int:
    value = cbor2.loads(data)
    if (
        isinstance(value, bool)
        or not isinstance(value, int)
        or not 0 <= value <= _U32_MAX
    ):
        raise ValueError(f"{name}: expected an unsigned 32-bit integer, got {value!r}")
    return value


@dataclass(frozen=True)
class Position:
    """Index of a note commitment in a note commitment tree."""

    value: int = 0

    def __post_init__(self) -> None:
        _check_u32("Position", self.value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"Position({self.value})"

    def to_cbor(self) -> bytes:
        """Encode as a CBOR unsigned integer."""
        return cbor2.dumps(self.value)

    @classmethod
    def from_cbor(cls, data: bytes) -> "Position":
        """Decode from a CBOR unsigned integer."""
        return cls(_decode_u32("Position", data))


@dataclass(frozen=True)
class NonHardenedChildIndex:
    """A non-hardened index in an HD wallet derivation path."""

    value: int = 0

    def __post_init__(self) -> None:
        _check_u32("NonHardenedChildIndex", self.value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"NonHardenedChildIndex({self.value})"

    def to_cbor(self) -> bytes:
        """Encode as a CBOR unsigned integer."""
        return cbor2.dumps(self.value)

    @classmethod
    def from_cbor(cls, data: bytes) -> "NonHardenedChildIndex":
        """Decode from a CBOR unsigned integer."""
        return cls(_decode_u32("NonHardenedChildIndex", data))