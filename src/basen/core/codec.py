"""Base-N integer codec.

Converts non-negative integers to and from strings of alphabet symbols,
most-significant symbol first. A codec may be pinned to a fixed width,
either directly (length) or by naming the largest value it must hold (max);
shorter encodings are left-padded with the zero symbol.

    >>> b64 = create(max=4095)
    >>> b64.length
    2
    >>> b64.encode(5)
    '05'
    >>> b64.decode('05')
    5
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Sequence

from ..utils.logging import get_logger
from .alphabet import DEFAULT_ALPHABET, DEFAULT_CHARACTERS, Alphabet
from .errors import ConfigError, RangeError, UnknownSymbolError, SymbolWidthError

# Largest integer a float64 holds exactly. Values are kept below it so that
# encodings stay interchangeable with float-backed implementations.
MAX_SAFE_INTEGER = 2**53 - 1

log = get_logger()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class CodecConfig:
    """Construction options. Only one of length and max_value may be set."""
    characters: str | Sequence[str] | None = None
    base: int | None = None
    length: int | None = None
    max_value: int | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> CodecConfig:
        """Build a config from a plain dict; "max" is accepted for max_value."""
        opts = dict(options)
        if "max" in opts:
            max_opt = opts.pop("max")
            if max_opt is not None:
                if opts.get("max_value") is not None:
                    raise ConfigError("cannot specify both max and max_value")
                opts["max_value"] = max_opt
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(opts) - known)
        if unknown:
            raise ConfigError(f"unknown option(s): {', '.join(unknown)}")
        return cls(**opts)


def find_length(max_value: int | None, base: int) -> int | None:
    """Smallest number of symbols whose capacity exceeds max_value.

    Base 64 capacities are 64, 4096, 262144, ... so 63 fits in one symbol
    and 64 needs two. Returns None when max_value is 0 or None, meaning
    variable-width output.
    """
    if not max_value:
        return None

    chars = 1
    supported = base
    while supported <= max_value:
        chars += 1
        supported *= base
    return chars


@dataclass(frozen=True)
class Codec:
    alphabet: Alphabet
    base: int
    length: int | None = None

    @property
    def characters(self) -> tuple[str, ...]:
        return self.alphabet.symbols

    @property
    def symbol_width(self) -> int:
        return self.alphabet.width

    def _pad(self, digits: list[str]) -> list[str]:
        missing = self.length - len(digits)
        if missing > 0:
            return [self.alphabet[0]] * missing + digits
        return digits

    def encode(self, num: int) -> str:
        """Encode a non-negative integer, most-significant symbol first."""
        if not _is_int(num):
            raise TypeError(f"value to be encoded must be an integer, got {type(num).__name__}")
        if num < 0:
            raise RangeError(f"value to be encoded must be non-negative, got {num}")
        if num >= MAX_SAFE_INTEGER:
            raise RangeError(f"value {num} must be below MAX_SAFE_INTEGER ({MAX_SAFE_INTEGER})")

        digits: list[str] = []
        place = 0
        # Below the base the quotient is its own remainder: no digits remain.
        while True:
            result = num // self.base**place
            remainder = result % self.base
            digits.insert(0, self.alphabet[remainder])
            place += 1
            if result == remainder:
                break

        if self.length is not None:
            digits = self._pad(digits)
            if len(digits) > self.length:
                raise RangeError(
                    f"base10 value of {num} (encoded: {''.join(digits)}) "
                    f"exceeds maximum length of {self.length}"
                )

        return "".join(digits)

    def decode(self, encoded: str) -> int:
        """Decode a string of whole symbols back to an integer."""
        if not isinstance(encoded, str):
            raise TypeError(f"value to be decoded must be a string, got {type(encoded).__name__}")

        width = self.alphabet.width
        if len(encoded) % width:
            raise SymbolWidthError(
                f"input of {len(encoded)} characters is not a whole number "
                f"of {width}-character symbols"
            )

        num = 0
        place = 0
        # Least-significant symbol sits at the right.
        for end in range(len(encoded), 0, -width):
            symbol = encoded[end - width:end]
            digit = self.alphabet.lookup(symbol)
            if digit is None or digit >= self.base:
                raise UnknownSymbolError(symbol)
            if place > 0:
                num += digit * self.base**place
            else:
                num += digit
            place += 1

        if num >= MAX_SAFE_INTEGER:
            raise RangeError(f"decoded value exceeds MAX_SAFE_INTEGER ({MAX_SAFE_INTEGER})")

        return num


def _check_positive(name: str, value: Any, minimum: int) -> None:
    if not _is_int(value):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(f"{name} must be at least {minimum}, got {value}")


def create(config: CodecConfig | Mapping[str, Any] | None = None, **options: Any) -> Codec:
    """Validate options and build a Codec.

    Accepts a CodecConfig, a mapping of option names (characters, base,
    length, max), keyword options, or any mix; keywords win.
    """
    if config is None:
        config = CodecConfig()
    elif not isinstance(config, CodecConfig):
        config = CodecConfig.from_mapping(config)
    if options:
        merged = {f.name: getattr(config, f.name) for f in fields(config)}
        if options.get("max") is not None:
            merged.pop("max_value")
        merged.update(options)
        config = CodecConfig.from_mapping(merged)

    if config.length is not None and config.max_value is not None:
        raise ConfigError("cannot specify both max and length")

    if config.characters is None or config.characters == DEFAULT_CHARACTERS:
        alphabet = DEFAULT_ALPHABET
    else:
        alphabet = Alphabet.from_characters(config.characters)

    base = len(alphabet) if config.base is None else config.base
    _check_positive("base", base, 2)
    if base > len(alphabet):
        raise ConfigError(f"base {base} exceeds the {len(alphabet)} available symbols")

    if config.length is not None:
        _check_positive("length", config.length, 1)
        length = config.length
    elif config.max_value is not None:
        _check_positive("max", config.max_value, 0)
        length = find_length(config.max_value, base)
    else:
        length = None

    log.debug("codec ready: base=%d symbol_width=%d length=%s", base, alphabet.width, length)
    return Codec(alphabet, base, length)
