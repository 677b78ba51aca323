"""Tests for the zarith helpers built on the two-character hex alphabet."""
import pytest

from basen import BaseNError, RangeError, SymbolWidthError, UnknownSymbolError
from basen.core.zarith import HEX_BYTE_ALPHABET, decode_zarith, encode_zarith


class TestEncodeZarith:
    """Test encode_zarith."""

    @pytest.mark.parametrize("value, expected", [
        (0, "00"),
        (64, "40"),
        (127, "7f"),
        (128, "8001"),
        (256, "8002"),
        (4096, "8020"),
        (1048576, "808040"),
    ])
    def test_vectors(self, value, expected):
        """Low groups come first, each but the last flagged with 0x80."""
        assert encode_zarith(value) == expected

    def test_negative_raises(self):
        """Negative values are rejected by the underlying codec."""
        with pytest.raises(RangeError):
            encode_zarith(-1)


class TestDecodeZarith:
    """Test decode_zarith."""

    @pytest.mark.parametrize("encoded, expected", [
        ("20", 32),
        ("8001", 128),
        ("808002", 32768),
        ("808040", 1048576),
    ])
    def test_vectors(self, encoded, expected):
        """Continuation bits are stripped before decoding."""
        assert decode_zarith(encoded) == expected

    def test_last_byte_must_be_below_0x80(self):
        """The most-significant byte has no continuation bit to strip."""
        with pytest.raises(UnknownSymbolError):
            decode_zarith("8080")

    @pytest.mark.parametrize("encoded", ["zz", "802", "80 0"])
    def test_invalid_hex_raises(self, encoded):
        """Text that is not whole hex bytes raises a codec error."""
        with pytest.raises(SymbolWidthError, match="invalid zarith hex"):
            decode_zarith(encoded)
        with pytest.raises(BaseNError):
            decode_zarith(encoded)

    def test_roundtrip(self):
        """Values across several byte groups survive a round trip."""
        for v in (0, 1, 127, 128, 16383, 16384, 2**40 + 7):
            assert decode_zarith(encode_zarith(v)) == v


def test_alphabet_is_byte_tokens():
    """The alphabet is the 128 hex bytes below 0x80."""
    assert len(HEX_BYTE_ALPHABET) == 128
    assert HEX_BYTE_ALPHABET[0x7F] == "7f"
