"""Byte buffer helpers shared by the encoder and the decoder."""

from __future__ import annotations

BytesLike = bytes | bytearray | memoryview


def as_bytes(source: BytesLike) -> bytes | bytearray:
    """Get an indexable byte sequence for any bytes-like input."""
    if isinstance(source, (bytes, bytearray)):
        return source
    return memoryview(source).tobytes()


def as_writable(out: BytesLike) -> memoryview:
    """Get a flat unsigned-byte view of a caller-supplied output buffer.

    Raises:
        TypeError: If the buffer is read-only.
    """
    view = memoryview(out).cast("B")
    if view.readonly:
        raise TypeError("Output buffer must be writable")
    return view
