"""Base-N integer encoding with configurable, multi-character alphabets."""

from .core.alphabet import DEFAULT_CHARACTERS, Alphabet, hex_tokens
from .core.codec import MAX_SAFE_INTEGER, Codec, CodecConfig, create, find_length
from .core.errors import (
    BaseNError,
    ConfigError,
    RangeError,
    SymbolWidthError,
    UnknownSymbolError,
)

__all__ = [
    "Alphabet",
    "BaseNError",
    "Codec",
    "CodecConfig",
    "ConfigError",
    "DEFAULT_CHARACTERS",
    "MAX_SAFE_INTEGER",
    "RangeError",
    "SymbolWidthError",
    "UnknownSymbolError",
    "create",
    "find_length",
    "hex_tokens",
]
