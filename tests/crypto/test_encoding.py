"""Tests for base58 encoding of keys and signatures."""

from __future__ import annotations

import pytest

from phantommask.crypto.encoding import (
    BASE58_ALPHABET,
    decode,
    decode_fixed,
    decode_private_key,
    decode_public_key,
    decode_signature,
    encode,
    max_encoded_length,
    utf8_bytes,
)
from phantommask.core.exceptions import DecodeError, InvalidKeyLength, InvalidSignatureLength, ValidationException


class TestAlphabet:
    def test_bitcoin_alphabet(self):
        assert BASE58_ALPHABET == "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

    @pytest.mark.parametrize("ch", ["0", "O", "I", "l"])
    def test_ambiguous_characters_excluded(self, ch):
        assert ch not in BASE58_ALPHABET


class TestEncode:
    """Known base58 values."""

    @pytest.mark.parametrize(
        "data,expected",
        [
            (b"", ""),
            (b"\x00", "1"),
            (b"bbb", "a3gV"),
            (bytes.fromhex("00000102"), "115T"),
            (bytes(32), "1" * 32),
        ],
    )
    def test_known_values(self, data, expected):
        assert encode(data) == expected

    def test_leading_zeros_preserved(self, rng):
        body = b"\x01" + rng.randbytes(20)
        for zeros in range(4):
            data = bytes(zeros) + body
            encoded = encode(data)
            assert encoded.startswith("1" * zeros)
            assert decode(encoded) == data


class TestDecode:
    def test_known_value(self):
        assert decode("a3gV") == b"bbb"
        assert decode("115T") == bytes.fromhex("00000102")

    def test_empty_string(self):
        assert decode("") == b""

    @pytest.mark.parametrize("value", ["0abc", "abcO", "Il", "abc!", "ab-cd", "é"])
    def test_invalid_characters(self, value):
        with pytest.raises(DecodeError):
            decode(value)

    @pytest.mark.parametrize("value", [" a3gV", "a3gV ", "a3gV\n", "a3 gV"])
    def test_whitespace_rejected(self, value):
        with pytest.raises(DecodeError):
            decode(value)

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            decode(b"a3gV")  # type: ignore[arg-type]

    def test_error_does_not_echo_input(self):
        with pytest.raises(DecodeError) as exc_info:
            decode("secret0value")
        assert "secret0value" not in exc_info.value.message
        assert exc_info.value.value_length == 12


class TestDecodeFixed:
    """Length checks after a successful decode."""

    def test_exact_length(self, master_key):
        assert decode_fixed(encode(master_key), 32) == master_key

    @pytest.mark.parametrize("length", [0, 1, 31, 33, 64])
    def test_wrong_key_length(self, length):
        with pytest.raises(InvalidKeyLength) as exc_info:
            decode_private_key(encode(b"\x07" * length), role="master private key")
        assert exc_info.value.actual == length
        assert exc_info.value.message == f"Master private key must be 32 bytes, got {length}"

    def test_public_key_length(self):
        with pytest.raises(InvalidKeyLength) as exc_info:
            decode_public_key(encode(b"\x07" * 31))
        assert exc_info.value.role == "public key"

    @pytest.mark.parametrize("length", [0, 32, 63, 65])
    def test_wrong_signature_length(self, length):
        with pytest.raises(InvalidSignatureLength) as exc_info:
            decode_signature(encode(b"\x07" * length))
        assert exc_info.value.actual == length

    def test_decode_error_takes_precedence(self):
        with pytest.raises(DecodeError):
            decode_private_key("0" * 44)

    def test_signature_round_trip(self, rng):
        signature = rng.randbytes(64)
        assert decode_signature(encode(signature)) == signature


class TestOversizedInput:
    """Inputs too long for the target length are rejected without decoding."""

    def test_max_encoded_length(self):
        assert max_encoded_length(32) == 44
        assert max_encoded_length(64) == 88

    def test_longest_valid_key_still_decodes(self):
        key = b"\xff" * 32
        assert decode_private_key(encode(key)) == key

    def test_moderately_long_input_reports_exact_length(self):
        with pytest.raises(InvalidKeyLength) as exc_info:
            decode_private_key(encode(b"\xff" * 100))
        assert exc_info.value.actual == 100

    def test_overlong_key(self):
        with pytest.raises(InvalidKeyLength) as exc_info:
            decode_private_key("z" * 1000, role="master private key")
        assert exc_info.value.actual is None
        assert exc_info.value.message == "Master private key must be 32 bytes, got more than 32"

    def test_overlong_leading_ones(self):
        with pytest.raises(InvalidKeyLength):
            decode_public_key("1" * 1000)

    def test_overlong_signature(self):
        with pytest.raises(InvalidSignatureLength) as exc_info:
            decode_signature("z" * 1000)
        assert exc_info.value.message == "Signature must be 64 bytes, got more than 64"

    def test_bad_characters_still_decode_error(self):
        with pytest.raises(DecodeError):
            decode_signature("0" * 1000)


class TestUtf8Bytes:
    def test_encodes_as_given(self):
        assert utf8_bytes("café", "appId") == b"caf\xc3\xa9"

    def test_lone_surrogate(self):
        with pytest.raises(ValidationException) as exc_info:
            utf8_bytes("app\udcff", "appId")
        assert exc_info.value.field == "appId"
        assert exc_info.value.message == "appId must be valid Unicode text"
