"""Tests for the alphabet lookup tables."""

from __future__ import annotations

import pytest

from b64codec.alphabet import (
    INVALID,
    PADDING,
    STANDARD_ALPHABET,
    URL_SAFE_ALPHABET,
    Alphabet,
)


@pytest.mark.parametrize("alphabet", list(Alphabet))
def test_forward_and_inverse_are_bijective(alphabet: Alphabet) -> None:
    """Every 6-bit value maps to a distinct byte and back."""
    assert len(alphabet.forward) == 64
    assert len(set(alphabet.forward)) == 64
    assert len(alphabet.inverse) == 256

    for value, char in enumerate(alphabet.forward):
        assert alphabet.inverse[char] == value

    decodable = [b for b in range(256) if alphabet.inverse[b] >= 0]
    assert len(decodable) == 64


@pytest.mark.parametrize("alphabet", list(Alphabet))
def test_inverse_marks_padding_and_invalid(alphabet: Alphabet) -> None:
    """The inverse table flags '=' as padding and everything else as invalid."""
    assert alphabet.inverse[ord("=")] == PADDING
    for b in b"\r\n \t.!*~\x00\xff":
        assert alphabet.inverse[b] == INVALID


def test_alphabets_differ_only_in_last_two_positions() -> None:
    """The URL-safe alphabet swaps '+/' for '-_'."""
    assert STANDARD_ALPHABET[:62] == URL_SAFE_ALPHABET[:62]
    assert STANDARD_ALPHABET[62:] == b"+/"
    assert URL_SAFE_ALPHABET[62:] == b"-_"

    assert Alphabet.STANDARD.inverse[ord("-")] == INVALID
    assert Alphabet.URL_SAFE.inverse[ord("+")] == INVALID
    assert Alphabet.URL_SAFE.inverse[ord("_")] == 63


def test_tables_are_immutable() -> None:
    """Inverse tables cannot be modified in place."""
    with pytest.raises(TypeError):
        Alphabet.STANDARD.inverse[0] = 0  # type: ignore[index]
