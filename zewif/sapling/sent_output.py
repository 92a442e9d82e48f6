"""Sender-side plaintext record of a Sapling note."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import cbor2

__all__ = ["SaplingSentOutput"]

_TYPE_NAME = "SaplingSentOutput"
_DIVERSIFIER_LEN = 11
_U256_LEN = 32
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_FIELDS = ("index", "diversifier", "receipient_public_key", "value", "rcm")


def _check_bytes(name: str, value: Any, length: int) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
    data = bytes(value)
    if len(data) != length:
        raise ValueError(f"{name} must be {length} bytes, got {len(data)}")
    return data


def _check_int(name: str, value: Any, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{name} out of range: {value}")
    return value


@dataclass
class SaplingSentOutput:
    """Plaintext of a Sapling note sent by the wallet.

    ``diversifier`` is 11 bytes; ``receipient_public_key`` and ``rcm`` are
    32 bytes each; ``value`` is the amount in zatoshis; ``index`` is the
    output's position within its transaction. Every field defaults to zero.
    """

    diversifier: bytes = bytes(_DIVERSIFIER_LEN)
    receipient_public_key: bytes = bytes(_U256_LEN)
    value: int = 0
    rcm: bytes = bytes(_U256_LEN)
    index: int = 0

    def __post_init__(self) -> None:
        self.diversifier = _check_bytes("diversifier", self.diversifier, _DIVERSIFIER_LEN)
        self.receipient_public_key = _check_bytes(
            "receipient_public_key", self.receipient_public_key, _U256_LEN
        )
        self.value = _check_int("value", self.value, _I64_MIN, _I64_MAX)
        self.rcm = _check_bytes("rcm", self.rcm, _U256_LEN)
        self.index = _check_int("index", self.index, 0, 2**64 - 1)

    def to_cbor(self) -> bytes:
        """Encode as a CBOR map tagged with the type name."""
        return cbor2.dumps(
            {
                "type": _TYPE_NAME,
                "index": self.index,
                "diversifier": self.diversifier,
                "receipient_public_key": self.receipient_public_key,
                "value": self.value,
                "rcm": self.rcm,
            }
        )

    @classmethod
    def from_cbor(cls, data: bytes) -> "SaplingSentOutput":
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
        missing = [name for name in _FIELDS if name not in decoded]
        if missing:
            raise ValueError(f"{_TYPE_NAME}: missing {', '.join(missing)}")
        try:
            return cls(**{name: decoded[name] for name in _FIELDS})
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{_TYPE_NAME}: {exc}") from exc