# zewif

Data types and a binary parsing toolkit for the Zcash Wallet Interchange Format
(ZeWIF), a common format for moving wallet data between Zcash wallet
implementations.

## Installation

```
pip install zewif
```

To run the test suite:

```
pip install "zewif[test]"
pytest
```

## What is included

- `zewif.parser`: the `Parser` class, a cursor that hands out bytes from a
  buffer in order (`next`, `peek`, `rest`, `peek_rest`, `remaining`,
  `check_finished`), plus the helpers `parse_with_context`, which prefixes any
  failure with `"Parsing <context>: "`, and `parse_buf`, which parses a whole
  buffer and fails if bytes are left over. Failures raise `ParseError`, a
  subclass of `ValueError`.
- `zewif.parseable`: item readers for little-endian integers (`parse_u8` to
  `parse_u64`, `parse_i8` to `parse_i64`), `parse_bool`, `parse_compact_size`,
  `parse_string`, `parse_pair`, `parse_fixed_length_list`, `parse_list`,
  `parse_map`, `parse_dict`, `parse_set` and `parse_optional`. The collection
  readers take another reader for their items.
- `zewif.position`: `Position` (a note commitment tree position) and
  `NonHardenedChildIndex`, both unsigned 32-bit values.
- `zewif.phgr_proof`: `PHGRProof`, a Sprout-era proof made of eight 33-byte
  compressed G1 points, with `to_bytes`, `from_bytes` and `parse`.
- `zewif.orchard_sent_output`: `OrchardSentOutput`, the sender's plaintext
  record of an Orchard note.
- `zewif.sapling.sent_output`: `SaplingSentOutput`, the sender's plaintext
  record of a Sapling note; every field defaults to zero.

Each value type encodes to CBOR with `to_cbor()` and decodes with the class
method `from_cbor()`. Constructors check byte lengths and integer ranges and
raise `TypeError` or `ValueError` on bad input.

## Example

```python
from zewif.parser import Parser
from zewif.parseable import parse_list, parse_u32
from zewif.phgr_proof import PHGRProof
from zewif.position import Position
from zewif.sapling.sent_output import SaplingSentOutput

p = Parser(bytes([0x02, 0x01, 0x00, 0x00, 0x00, 0x02, 0x00, 0x00, 0x00]))
assert parse_list(p, parse_u32) == [1, 2]
p.check_finished()

proof = PHGRProof(*([bytes(33)] * 8))
assert len(proof.to_bytes()) == 264
assert PHGRProof.from_bytes(proof.to_bytes()) == proof

position = Position(42)
assert Position.from_cbor(position.to_cbor()) == position

sent = SaplingSentOutput(value=5_000_000)
assert SaplingSentOutput.from_cbor(sent.to_cbor()) == sent
```

## What it does not do

The package covers the parsing toolkit and the value types listed above. It
has no wallet or account container, no types for networks, seed phrase
languages, receiver types, keys or addresses, no file storage and no command
line tool.