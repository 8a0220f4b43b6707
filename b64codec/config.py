"""Codec configuration.

This module defines the immutable configuration record shared by encoders
and decoders, and the three canonical configurations (Basic, URL-safe and
MIME) that ship pre-built.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from b64codec.alphabet import INVALID, STANDARD_INVERSE, Alphabet
from b64codec.exceptions import InvalidArgumentError

MIME_LINE_MAX = 76
CRLF = b"\r\n"


def _check_separator(separator: bytes, alphabet: Alphabet) -> None:
    for b in separator:
        if STANDARD_INVERSE[b] != INVALID or alphabet.inverse[b] != INVALID:
            raise InvalidArgumentError(f"Illegal base64 line separator character 0x{b:02x}")


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for a Base64 encoder or decoder.

    Attributes:
        alphabet: The alphabet used to map 6-bit values.
        padding: Whether the encoder emits trailing ``=`` characters.
        line_max: Maximum encoded line length, rounded down to a multiple of
            4. Values below 4 mean unbounded output.
        line_separator: Bytes inserted between encoded lines.
        mime: Whether the decoder silently skips non-alphabet bytes.

    Raises:
        InvalidArgumentError: If the line separator contains a Base64
            alphabet character or the padding character.
    """

    alphabet: Alphabet = Alphabet.STANDARD
    padding: bool = True
    line_max: int = 0
    line_separator: bytes = b""
    mime: bool = False

    def __post_init__(self) -> None:
        separator = bytes(self.line_separator)
        _check_separator(separator, self.alphabet)
        # lines hold whole 4-character atoms
        object.__setattr__(self, "line_separator", separator)
        object.__setattr__(self, "line_max", max(0, self.line_max) >> 2 << 2)

    @property
    def wraps_lines(self) -> bool:
        return self.line_max > 0

    def without_padding(self) -> CodecConfig:
        """Get an equivalent configuration that emits no padding.

        Returns:
            This configuration if padding is already disabled, otherwise a
            copy with padding disabled.
        """
        if not self.padding:
            return self
        return replace(self, padding=False)


BASIC = CodecConfig()
URL_SAFE = CodecConfig(alphabet=Alphabet.URL_SAFE)
MIME = CodecConfig(line_max=MIME_LINE_MAX, line_separator=CRLF, mime=True)


def mime_config(line_length: int, line_separator: bytes) -> CodecConfig:
    """Build a MIME configuration with a custom line length and separator.

    Args:
        line_length: Length of each output line, rounded down to the nearest
            multiple of 4. A value of 0 or below disables line wrapping.
        line_separator: Bytes placed between output lines.

    Returns:
        The MIME configuration, or the Basic configuration when
        ``line_length`` disables wrapping.

    Raises:
        InvalidArgumentError: If the separator contains a Base64 alphabet
            character or the padding character.
    """
    separator = bytes(line_separator)
    _check_separator(separator, Alphabet.STANDARD)

    if line_length <= 0:
        return BASIC

    return CodecConfig(
        line_max=line_length,
        line_separator=separator,
        mime=True,
    )
