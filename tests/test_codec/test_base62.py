"""
Tests for the base62 codec

Vectors come from the segmentio reference implementation; the property tests
check the invariants the identifier format depends on: round-tripping,
pad-never-truncate and order preservation.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ksuid_toolkit.codec import base62
from ksuid_toolkit.kernel.errors import InvalidCharacter

VECTORS = [
    ("0669F7EFB5A1CD34B5F99D1154FB6853345C9735", "ujtsYcgvSTl8PAuAdqWYSMnLOv"),
    ("08499F6AD16FC62A85C3D9C376D121A5478BF798", "1BJYSC0hh6mbTwDxT0L5c1SlTjM"),
    ("066A029C73FC1AA3B2446246D6E89FCD909E8FE8", "ujzPyRiIAffKhBux4PvQdDqMHY"),
]


def test_alphabet() -> None:
    assert base62.ALPHABET == "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    assert base62.BASE == 62


def test_alphabet_is_ascii_ordered() -> None:
    """Sortability of the printable form depends on this"""
    assert list(base62.ALPHABET) == sorted(base62.ALPHABET)


def test_index_of_every_character() -> None:
    for index, char in enumerate(base62.ALPHABET):
        assert base62.index_of(char) == index


def test_index_of_rejects_non_alphabet() -> None:
    with pytest.raises(InvalidCharacter) as exc_info:
        base62.index_of("-")
    assert exc_info.value.char == "-"


# =============================================================================
# Known vectors
# =============================================================================


@pytest.mark.parametrize("raw_hex,text", VECTORS)
def test_encode_no_padding(raw_hex: str, text: str) -> None:
    assert base62.encode(bytes.fromhex(raw_hex)) == text


@pytest.mark.parametrize("raw_hex,text", VECTORS)
def test_encode_with_padding(raw_hex: str, text: str) -> None:
    assert base62.encode(bytes.fromhex(raw_hex), len(text) + 4) == "0000" + text


@pytest.mark.parametrize("raw_hex,text", VECTORS)
def test_encode_with_same_length_padding(raw_hex: str, text: str) -> None:
    assert base62.encode(bytes.fromhex(raw_hex), len(text)) == text


@pytest.mark.parametrize("raw_hex,text", VECTORS)
def test_encode_with_padding_too_small_never_truncates(raw_hex: str, text: str) -> None:
    assert base62.encode(bytes.fromhex(raw_hex), len(text) - 4) == text


@pytest.mark.parametrize("raw_hex,text", VECTORS)
def test_decode(raw_hex: str, text: str) -> None:
    assert base62.decode(text) == bytes.fromhex(raw_hex)


@pytest.mark.parametrize("raw_hex,text", VECTORS)
def test_decode_ignores_leading_zero_digits(raw_hex: str, text: str) -> None:
    assert base62.decode("0000" + text) == bytes.fromhex(raw_hex)


# =============================================================================
# Edge cases
# =============================================================================


def test_empty_and_zero_inputs_encode_to_empty_string() -> None:
    assert base62.encode(b"") == ""
    assert base62.encode(b"\x00\x00\x00") == ""


def test_zero_input_pads_with_zero_digits() -> None:
    assert base62.encode(b"\x00" * 20, 27) == "0" * 27


def test_decode_empty_string() -> None:
    assert base62.decode("") == b""
    assert base62.decode("000") == b""


def test_high_bit_bytes_are_unsigned() -> None:
    """0xFF is 255, not -1: 255 = 4 * 62 + 7"""
    assert base62.encode(b"\xff") == "47"
    assert base62.decode("47") == b"\xff"


def test_decode_is_minimal_width() -> None:
    """No sign byte is added even when the top bit is set"""
    assert base62.decode(base62.encode(b"\x80" + b"\x00" * 19)) == b"\x80" + b"\x00" * 19


def test_decode_rejects_invalid_characters() -> None:
    with pytest.raises(InvalidCharacter) as exc_info:
        base62.decode("01-AB*ab")
    assert exc_info.value.char == "-"
    assert exc_info.value.position == 2


@pytest.mark.parametrize("bad", [" ", "+", "/", "=", "_", "é"])
def test_decode_rejects_characters_outside_alphabet(bad: str) -> None:
    with pytest.raises(InvalidCharacter):
        base62.decode("abc" + bad)


# =============================================================================
# Properties
# =============================================================================


@given(st.binary(max_size=20))
def test_decode_inverts_encode_up_to_leading_zeros(data: bytes) -> None:
    assert base62.decode(base62.encode(data)) == data.lstrip(b"\x00")


@given(st.binary(max_size=20), st.integers(min_value=0, max_value=40))
def test_padding_adds_zeros_and_never_truncates(data: bytes, pad_to: int) -> None:
    natural = base62.encode(data)
    padded = base62.encode(data, pad_to)
    if pad_to >= len(natural):
        assert len(padded) == pad_to
        assert padded == "0" * (pad_to - len(natural)) + natural
    else:
        assert padded == natural


@given(st.binary(min_size=20, max_size=20), st.binary(min_size=20, max_size=20))
def test_fixed_width_encoding_preserves_byte_order(a: bytes, b: bytes) -> None:
    ea = base62.encode(a, 27)
    eb = base62.encode(b, 27)
    assert (a < b) == (ea < eb)
    assert (a == b) == (ea == eb)


@given(st.text(alphabet=base62.ALPHABET, max_size=30))
def test_every_alphabet_string_decodes(text: str) -> None:
    value = int.from_bytes(base62.decode(text), "big")
    expected = 0
    for char in text:
        expected = expected * 62 + base62.ALPHABET.index(char)
    assert value == expected
