"""Symbol alphabets.

An alphabet is an ordered run of equal-width symbols; the symbol at index i
is the digit with value i. Symbols may be longer than one character, which
lets a dictionary of hex pairs ("00".."7f") act as a byte-wide alphabet.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .errors import ConfigError

# 0123456789 123456789 123456789 123456789 123456789 123456789 123
#           1         2         3         4         5         6
DEFAULT_CHARACTERS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_-"


@dataclass(frozen=True)
class Alphabet:
    symbols: tuple[str, ...]
    width: int
    # symbol -> first index it appears at
    index: dict[str, int] = field(repr=False, compare=False)

    @classmethod
    def from_characters(cls, characters: str | Sequence[str]) -> Alphabet:
        """Validate an alphabet and build its reverse lookup.

        A plain string is split into single-character symbols. Any other
        sequence is taken symbol by symbol and every symbol must have the
        same, non-zero width.
        """
        if isinstance(characters, str):
            symbols = tuple(characters)
        else:
            try:
                symbols = tuple(characters)
            except TypeError:
                raise ConfigError(
                    f"characters must be a string or a sequence of strings, "
                    f"got {type(characters).__name__}"
                ) from None

        if not symbols:
            raise ConfigError("characters must not be empty")

        for sym in symbols:
            if not isinstance(sym, str):
                raise ConfigError(f"every symbol must be a string, got {sym!r}")

        width = len(symbols[0])
        if width == 0:
            raise ConfigError("symbols must be at least one character wide")
        for i, sym in enumerate(symbols):
            if len(sym) != width:
                raise ConfigError(
                    f"inconsistent symbol width: {sym!r} at index {i} has "
                    f"{len(sym)} characters, expected {width}"
                )

        index: dict[str, int] = {}
        for i, sym in enumerate(symbols):
            index.setdefault(sym, i)

        return cls(symbols, width, index)

    def __len__(self) -> int:
        return len(self.symbols)

    def __getitem__(self, digit: int) -> str:
        return self.symbols[digit]

    def lookup(self, symbol: str) -> int | None:
        """Return the digit value of a symbol, or None if it is not present."""
        return self.index.get(symbol)


def hex_tokens(count: int) -> tuple[str, ...]:
    """Two-character lowercase hex tokens for 0..count-1 ("00", "01", ...)."""
    if not 1 <= count <= 256:
        raise ConfigError(f"hex token count must be 1-256, got {count}")
    return tuple(f"{v:02x}" for v in range(count))


DEFAULT_ALPHABET = Alphabet.from_characters(DEFAULT_CHARACTERS)
