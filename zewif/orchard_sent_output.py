"""Sender-side plaintext record of an Orchard note."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import cbor2

__all__ = ["OrchardSentOutput"]

_TYPE_NAME = "OrchardSentOutput"
_DIVERSIFIER_LEN = 11
_U256_LEN = 32
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _check_bytes(name: str, value: Any, length: int) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
    data = bytes(value)
    if len(data) != length:
        raise ValueError(f"{name} must be {length} bytes, got {len(data)}")
    return data


def _check_amount(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an integer, got {type(value).__name__}")
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"value out of range: {value}")
    return value


def _check_index(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"index must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"index must not be negative: {value}")
    return value


@dataclass
class OrchardSentOutput:
    """Plaintext of an Orchard note sent by the wallet.

    ``diversifier`` is 11 bytes; ``receipient_public_key``, ``rho``, ``psi``
    and ``rcm`` are 32 bytes each; ``value`` is the amount in zatoshis;
    ``index`` is the output's position within its transaction.
    """

    diversifier: bytes
    receipient_public_key: bytes
    value: int
    rho: bytes
    psi: bytes
    rcm: bytes
    index: int = field(default=0)

    def __post_init__(self) -> None:
        self.diversifier = _check_bytes("diversifier", self.diversifier, _DIVERSIFIER_LEN)
        self.receipient_public_key = _check_bytes(
            "receipient_public_key", self.receipient_public_key, _U256_LEN
        )
        self.value = _check_amount(self.value)
        self.rho = _check_bytes("rho", self.rho, _U256_LEN)
        self.psi = _check_bytes("psi", self.psi, _U256_LEN)
        self.rcm = _check_bytes("rcm", self.rcm, _U256_LEN)
        self.index = _check_index(self.index)

    def to_cbor(self) -> bytes:
        """Encode as a CBOR map tagged with the type name."""
        return cbor2.dumps(
            {
                "type": _TYPE_NAME,
                "index": self.index,
                "diversifier": self.diversifier,
                "receipient_public_key": self.receipient_public_key,
                "value": self.value,
                "rho": self.rho,
                "psi": self.psi,
                "rcm": self.rcm,
            }
        )

    @classmethod
    def from_cbor(cls, data: bytes) -> "OrchardSentOutput":
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
        names = ("index", "diversifier", "receipient_public_key", "value", "rho", "psi", "rcm")
        missing = [name for name in names if name not in decoded]
        if missing:
            raise ValueError(f"{_TYPE_NAME}: missing {', '.join(missing)}")
        try:
            return cls(**{name: decoded[name] for name in names})
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{_TYPE_NAME}: {exc}") from exc