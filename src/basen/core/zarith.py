"""Zarith (little-endian base-128 varint) helpers.

A base-128 codec over two-character hex tokens yields one byte per digit,
most-significant first. Zarith wants the reverse order with bit 0x80 set on
every byte except the most-significant one:

    256  -> base-128 "0200" -> zarith "8002"
"""
from __future__ import annotations

from .alphabet import hex_tokens
from .codec import create
from .errors import SymbolWidthError

HEX_BYTE_ALPHABET = hex_tokens(128)

_BASE128 = create(characters=HEX_BYTE_ALPHABET)


def encode_zarith(num: int) -> str:
    """Encode a non-negative integer as zarith hex."""
    digits = bytes.fromhex(_BASE128.encode(num))
    out = bytes(v if i == 0 else v | 0x80 for i, v in enumerate(digits))
    return out[::-1].hex()


def decode_zarith(encoded: str) -> int:
    """Decode zarith hex back to an integer."""
    try:
        raw = bytes.fromhex(encoded)[::-1]
    except ValueError:
        raise SymbolWidthError(f"invalid zarith hex {encoded!r}") from None
    digits = bytes(v if i == 0 else v & 0x7F for i, v in enumerate(raw))
    return _BASE128.decode(digits.hex())
