"""Binary parsing primitives: a cursor over a byte buffer and helpers to run item parsers."""

from __future__ import annotations

from typing import Callable, TypeVar, Union

__all__ = ["ParseError", "Parser", "ParseFn", "parse_with_context", "parse_buf"]

T = TypeVar("T")

BytesLike = Union[bytes, bytearray, memoryview]


class ParseError(ValueError):
    """Raised when binary data cannot be parsed."""


class Parser:
    """A cursor over a byte buffer that hands out bytes in order."""

    def __init__(self, buffer: BytesLike, trace: bool = False) -> None:
        self.buffer = bytes(buffer)
        self.offset = 0
        self.trace = trace

    def __len__(self) -> int:
        return len(self.buffer)

    def __repr__(self) -> str:
        return (
            f"Parser(offset={self.offset}, len={len(self)}, "
            f"remaining={self.remaining()})"
        )

    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return len(self.buffer) - self.offset

    def is_empty(self) -> bool:
        """True if the underlying buffer holds no bytes at all."""
        return not self.buffer

    def check_finished(self) -> None:
        """Raise ParseError if any bytes are left unconsumed."""
        if self.offset < len(self.buffer):
            raise ParseError(f"Buffer has {self.remaining()} bytes left")

    def next(self, n: int) -> bytes:
        """Consume and return the next ``n`` bytes."""
        if n < 0:
            raise ParseError(f"Cannot read a negative number of bytes: {n}")
        if self.offset + n > len(self.buffer):
            raise ParseError(
                f"Buffer underflow at offset {self.offset}, needed {n} bytes, "
                f"only {self.remaining()} remaining"
            )
        data = self.buffer[self.offset : self.offset + n]
        self.offset += n
        if self.trace:
            print(
                f"\tnext({n}): {data.hex()!r} remaining: {self.remaining()} "
                f"peek: {self.peek(100).hex()!r}"
            )
        return data

    def peek(self, n: int) -> bytes:
        """Return up to ``n`` upcoming bytes without consuming them."""
        available = max(0, min(n, self.remaining()))
        return self.buffer[self.offset : self.offset + available]

    def rest(self) -> bytes:
        """Consume and return every remaining byte."""
        return self.next(self.remaining())

    def peek_rest(self) -> bytes:
        """Return every remaining byte without consuming it."""
        return self.buffer[self.offset :]

    def trace_message(self, msg: str) -> None:
        """Print ``msg`` and the unconsumed bytes when tracing is on."""
        if self.trace:
            print(f"{msg}: {self.peek_rest().hex()}")


ParseFn = Callable[[Parser], T]


def parse_with_context(p: Parser, item: Callable[[Parser], T], context: str) -> T:
    """Run ``item`` on ``p``, prefixing any parse failure with ``context``."""
    try:
        return item(p)
    except (ParseError, ValueError) as exc:
        raise ParseError(f"Parsing {context}: {exc}") from exc


def parse_buf(buf: BytesLike, item: Callable[[Parser], T], trace: bool = False) -> T:
    """Parse a whole buffer with ``item``; every byte must be consumed."""
    p = Parser(buf, trace)
    result = item(p)
    p.check_finished()
    return result