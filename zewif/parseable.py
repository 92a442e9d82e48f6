"""Item parsers for primitive values and collections read from a Parser."""

from __future__ import annotations

import struct
from typing import Callable, Optional, TypeVar

from .parser import ParseError, Parser, parse_with_context

__all__ = [
    "parse_u8",
    "parse_u16",
    "parse_u32",
    "parse_u64",
    "parse_i8",
    "parse_i16",
    "parse_i32",
    "parse_i64",
    "parse_bool",
    "parse_compact_size",
    "parse_string",
    "parse_pair",
    "parse_fixed_length_list",
    "parse_list",
    "parse_map",
    "parse_dict",
    "parse_set",
    "parse_optional",
]

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_I8 = struct.Struct("<b")
_I16 = struct.Struct("<h")
_I32 = struct.Struct("<i")
_I64 = struct.Struct("<q")


def _read(p: Parser, layout: struct.Struct, name: str) -> int:
    try:
        data = p.next(layout.size)
    except ParseError as exc:
        raise ParseError(f"{name}: {exc}") from exc
    return layout.unpack(data)[0]


def parse_u8(p: Parser) -> int:
    """Read one unsigned byte."""
    try:
        return p.next(1)[0]
    except ParseError as exc:
        raise ParseError(f"u8: {exc}") from exc


def parse_u16(p: Parser) -> int:
    """Read a little-endian unsigned 16-bit integer."""
    return _read(p, _U16, "u16")


def parse_u32(p: Parser) -> int:
    """Read a little-endian unsigned 32-bit integer."""
    return _read(p, _U32, "u32")


def parse_u64(p: Parser) -> int:
    """Read a little-endian unsigned 64-bit integer."""
    return _read(p, _U64, "u64")


def parse_i8(p: Parser) -> int:
    """Read one signed byte."""
    return _read(p, _I8, "i8")


def parse_i16(p: Parser) -> int:
    """Read a little-endian signed 16-bit integer."""
    return _read(p, _I16, "i16")


def parse_i32(p: Parser) -> int:
    """Read a little-endian signed 32-bit integer."""
    return _read(p, _I32, "i32")


def parse_i64(p: Parser) -> int:
    """Read a little-endian signed 64-bit integer."""
    return _read(p, _I64, "i64")


def parse_bool(p: Parser) -> bool:
    """Read a boolean stored as a single 0 or 1 byte."""
    byte = parse_with_context(p, parse_u8, "bool")
    if byte == 0:
        return False
    if byte == 1:
        return True
    raise ParseError(f"Invalid boolean value: {byte}")


def parse_compact_size(p: Parser) -> int:
    """Read a variable-length CompactSize integer."""
    first = parse_with_context(p, parse_u8, "compact size")
    if first < 0xFD:
        return first
    if first == 0xFD:
        return parse_with_context(p, parse_u16, "compact size")
    if first == 0xFE:
        return parse_with_context(p, parse_u32, "compact size")
    return parse_with_context(p, parse_u64, "compact size")


def parse_string(
    p: Parser, length_parser: Optional[Callable[[Parser], int]] = None
) -> str:
    """Read a UTF-8 string prefixed by its length.

    The length is a CompactSize unless ``length_parser`` says otherwise.
    """
    reader = length_parser if length_parser is not None else parse_compact_size
    length = parse_with_context(p, reader, "string length")
    if length < 0:
        raise ParseError(f"converting string length to usize: {length} is negative")
    data = parse_with_context(p, lambda q: q.next(length), "string data")
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"string: {exc}") from exc


def parse_pair(
    p: Parser, first: Callable[[Parser], K], second: Callable[[Parser], V]
) -> tuple[K, V]:
    """Read two items in sequence."""
    a = parse_with_context(p, first, "first item of pair")
    b = parse_with_context(p, second, "second item of pair")
    return a, b


def parse_fixed_length_list(
    p: Parser, length: int, item: Callable[[Parser], T]
) -> list[T]:
    """Read exactly ``length`` items."""
    return [
        parse_with_context(p, item, f"array item {i} of {length - 1}")
        for i in range(length)
    ]


def parse_list(p: Parser, item: Callable[[Parser], T]) -> list[T]:
    """Read a CompactSize count followed by that many items."""
    length = parse_with_context(p, parse_compact_size, "array length")
    return parse_fixed_length_list(p, length, item)


def parse_map(
    p: Parser, key: Callable[[Parser], K], value: Callable[[Parser], V]
) -> list[tuple[K, V]]:
    """Read a CompactSize count followed by that many key/value pairs, in order."""
    length = parse_with_context(p, parse_compact_size, "map length")
    return [
        parse_with_context(p, lambda q: parse_pair(q, key, value), "map item")
        for _ in range(length)
    ]


def parse_dict(
    p: Parser, key: Callable[[Parser], K], value: Callable[[Parser], V]
) -> dict[K, V]:
    """Read a map into a dict; later duplicate keys win."""
    return dict(parse_map(p, key, value))


def parse_set(p: Parser, item: Callable[[Parser], T]) -> set[T]:
    """Read a CompactSize count followed by that many set members."""
    length = parse_with_context(p, parse_compact_size, "set length")
    return {parse_with_context(p, item, "set item") for _ in range(length)}


def parse_optional(p: Parser, item: Callable[[Parser], T]) -> Optional[T]:
    """Read a presence byte (0 or 1) followed by the item when present."""
    discriminant = parse_with_context(p, parse_u8, "optional discriminant")
    if discriminant == 0x00:
        return None
    if discriminant == 0x01:
        return parse_with_context(p, item, "optional value")
    raise ParseError(f"Invalid optional discriminant: 0x{discriminant:02x}")