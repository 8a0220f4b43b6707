"""Output length calculation.

Both directions compute the size of their result before any byte is
produced, so the output buffer is allocated once and never grown.
"""

from __future__ import annotations

from b64codec.alphabet import INVALID, PAD_BYTE
from b64codec.config import CodecConfig
from b64codec.exceptions import InvalidLengthError


def encoded_length(config: CodecConfig, source_length: int) -> int:
    """Compute the exact number of bytes produced by encoding.

    Args:
        config: The encoder configuration.
        source_length: Number of input bytes.

    Returns:
        The encoded length, including any line separators.
    """
    if config.padding:
        length = 4 * ((source_length + 2) // 3)
    else:
        remainder = source_length % 3
        length = 4 * (source_length // 3) + (0 if remainder == 0 else remainder + 1)

    # separators go between lines only, never after the last one
    if config.wraps_lines and length > 0:
        length += (length - 1) // config.line_max * len(config.line_separator)
    return length


def decoded_length(config: CodecConfig, source: bytes) -> int:
    """Compute the number of bytes produced by decoding.

    The result is exact for well-formed Basic and URL-safe input and an upper
    bound in MIME mode, where stray bytes may sit anywhere in the input.

    Args:
        config: The decoder configuration.
        source: The encoded input.

    Returns:
        The decoded length.

    Raises:
        InvalidLengthError: If the input holds a single byte that cannot be
            skipped.
    """
    inverse = config.alphabet.inverse
    source_length = len(source)

    if source_length < 2:
        if source_length == 0 or (config.mime and inverse[source[0]] < 0):
            return 0
        raise InvalidLengthError("Input should at least have 2 bytes for base64 bytes")

    length = source_length
    padding = 0
    if config.mime:
        skipped = 0
        for position, b in enumerate(source):
            if b == PAD_BYTE:
                length -= source_length - position
                break
            if inverse[b] == INVALID:
                skipped += 1
        length -= skipped
    elif source[-1] == PAD_BYTE:
        padding += 1
        if source[-2] == PAD_BYTE:
            padding += 1

    if padding == 0 and length & 0x03:
        padding = 4 - (length & 0x03)
    return 3 * ((length + 3) >> 2) - padding
