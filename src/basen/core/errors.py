"""Exception hierarchy for the codec.

Each error also derives from the closest builtin so callers that only
know about ValueError / LookupError keep working.
"""
from __future__ import annotations


class BaseNError(Exception):
    """Base class for all codec failures."""


class ConfigError(BaseNError, ValueError):
    """Invalid construction options."""


class RangeError(BaseNError, ValueError):
    """Value outside what the codec can represent."""


class UnknownSymbolError(BaseNError, LookupError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f"unknown symbol {symbol!r} encountered")
        self.symbol = symbol


class SymbolWidthError(BaseNError, ValueError):
    pass
