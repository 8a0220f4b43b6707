"""Base64 alphabet lookup tables.

The forward tables translate 6-bit values into their alphabet bytes, the
inverse tables translate any byte value (0-255) back into its 6-bit value,
the ``PADDING`` marker or the ``INVALID`` marker. All tables are built once
at import time and are immutable.
"""

from __future__ import annotations

from enum import Enum

INVALID = -1
PADDING = -2

PAD_BYTE = ord("=")

# "Table 1: The Base64 Alphabet" of RFC 4648 and RFC 2045.
STANDARD_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

# "Table 2: The URL and Filename safe Base64 Alphabet" of RFC 4648.
URL_SAFE_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"


def _build_inverse(forward: bytes) -> tuple[int, ...]:
    table = [INVALID] * 256
    for value, char in enumerate(forward):
        table[char] = value
    table[PAD_BYTE] = PADDING
    return tuple(table)


STANDARD_INVERSE = _build_inverse(STANDARD_ALPHABET)
URL_SAFE_INVERSE = _build_inverse(URL_SAFE_ALPHABET)


class Alphabet(Enum):
    """The two supported Base64 alphabets.

    They differ only at positions 62 and 63 (``+/`` versus ``-_``).

    Attributes:
        forward: 64-byte table, index is the 6-bit value.
        inverse: 256-entry table indexed by raw byte value.
    """

    STANDARD = "standard"
    URL_SAFE = "url_safe"

    @property
    def forward(self) -> bytes:
        if self is Alphabet.URL_SAFE:
            return URL_SAFE_ALPHABET
        return STANDARD_ALPHABET

    @property
    def inverse(self) -> tuple[int, ...]:
        if self is Alphabet.URL_SAFE:
            return URL_SAFE_INVERSE
        return STANDARD_INVERSE
