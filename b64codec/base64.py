"""Base64 encoder and decoder selectors.

This module provides the pre-built Basic, URL-safe and MIME encoders and
decoders, plus a few module-level shortcuts for the common cases.
"""

from __future__ import annotations

from b64codec.buffers import BytesLike
from b64codec.config import BASIC, CRLF, MIME, MIME_LINE_MAX, URL_SAFE, mime_config
from b64codec.decoder import Decoder
from b64codec.encoder import Encoder

_BASIC_ENCODER = Encoder(BASIC)
_URL_SAFE_ENCODER = Encoder(URL_SAFE)
_MIME_ENCODER = Encoder(MIME)

_BASIC_DECODER = Decoder(BASIC)
_URL_SAFE_DECODER = Decoder(URL_SAFE)
_MIME_DECODER = Decoder(MIME)


class Base64:
    """Selectors for the encoders and decoders of the Base64 encoding scheme.

    - Basic: "The Base64 Alphabet" of RFC 4648 and RFC 2045. The encoder adds
      no line separators and the decoder rejects anything outside the
      alphabet.
    - URL and Filename safe: the alphabet of Table 2 of RFC 4648, otherwise
      like Basic.
    - MIME: the RFC 2045 alphabet with output lines of at most 76 characters
      separated by ``\\r\\n`` (never after the last line). The decoder
      ignores every byte outside the alphabet.

    All returned encoders and decoders are immutable and thread-safe.
    """

    @staticmethod
    def get_encoder() -> Encoder:
        """Get the Basic encoder."""
        return _BASIC_ENCODER

    @staticmethod
    def get_url_encoder() -> Encoder:
        """Get the URL and Filename safe encoder."""
        return _URL_SAFE_ENCODER

    @staticmethod
    def get_mime_encoder(
        line_length: int | None = None,
        line_separator: bytes | None = None,
    ) -> Encoder:
        """Get a MIME encoder, optionally with a custom line layout.

        Args:
            line_length: Length of each output line, rounded down to the
                nearest multiple of 4. A value of 0 or below disables line
                wrapping. Defaults to 76.
            line_separator: Bytes placed between output lines. Defaults to
                ``b"\\r\\n"``.

        Returns:
            The MIME encoder.

        Raises:
            InvalidArgumentError: If ``line_separator`` contains a character
                of the Base64 alphabet.
        """
        if line_length is None and line_separator is None:
            return _MIME_ENCODER

        config = mime_config(
            MIME_LINE_MAX if line_length is None else line_length,
            CRLF if line_separator is None else line_separator,
        )
        if config is BASIC:
            return _BASIC_ENCODER
        return Encoder(config)

    @staticmethod
    def get_decoder() -> Decoder:
        """Get the Basic decoder."""
        return _BASIC_DECODER

    @staticmethod
    def get_url_decoder() -> Decoder:
        """Get the URL and Filename safe decoder."""
        return _URL_SAFE_DECODER

    @staticmethod
    def get_mime_decoder() -> Decoder:
        """Get the MIME decoder."""
        return _MIME_DECODER


def b64encode(data: BytesLike) -> bytes:
    """Encode bytes with the Basic encoder."""
    return _BASIC_ENCODER.encode(data)


def b64decode(data: BytesLike | str) -> bytes:
    """Decode Basic Base64 input, padded or not."""
    return _BASIC_DECODER.decode(data)


def urlsafe_b64encode(data: BytesLike) -> bytes:
    """Encode bytes with the URL and Filename safe encoder."""
    return _URL_SAFE_ENCODER.encode(data)


def urlsafe_b64decode(data: BytesLike | str) -> bytes:
    """Decode URL and Filename safe Base64 input, padded or not."""
    return _URL_SAFE_DECODER.decode(data)
