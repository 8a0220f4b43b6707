"""Codec interfaces for b64codec.

This module defines protocols for Base64 encoding and decoding so callers
can depend on the behaviour rather than on the concrete classes.
"""

from __future__ import annotations

from typing import Protocol

from b64codec.buffers import BytesLike


class IEncoder(Protocol):
    """Interface for Base64 encoding operations."""

    def encode(self, source: BytesLike) -> bytes:
        """Encode bytes into a newly allocated result.

        Args:
            source: The bytes to encode.

        Returns:
            The encoded bytes.
        """
        ...

    def encode_into(self, source: BytesLike, out: BytesLike) -> int:
        """Encode bytes into a caller-supplied buffer.

        Args:
            source: The bytes to encode.
            out: A writable buffer.

        Returns:
            The number of bytes written.

        Raises:
            OutputTooSmallError: When the buffer cannot hold the result.
        """
        ...

    def without_padding(self) -> IEncoder:
        """Get an equivalent encoder that emits no padding characters.

        Returns:
            The derived encoder.
        """
        ...


class IDecoder(Protocol):
    """Interface for Base64 decoding operations."""

    def decode(self, source: BytesLike | str) -> bytes:
        """Decode Base64 input into a newly allocated result.

        Args:
            source: The encoded bytes or text.

        Returns:
            The decoded bytes.

        Raises:
            InvalidLengthError: When the input is too short.
            InvalidInputError: When the input is not valid Base64.
        """
        ...

    def decode_into(self, source: BytesLike | str, out: BytesLike) -> int:
        """Decode Base64 input into a caller-supplied buffer.

        Args:
            source: The encoded bytes or text.
            out: A writable buffer.

        Returns:
            The number of bytes written.

        Raises:
            OutputTooSmallError: When the buffer cannot hold the result.
        """
        ...
