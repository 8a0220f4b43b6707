"""Base64 encoder.

This module packs input bytes into 6-bit groups, maps them through the
forward alphabet table and optionally adds padding and line separators.
"""

from __future__ import annotations

from b64codec.alphabet import PAD_BYTE
from b64codec.buffers import BytesLike, as_bytes, as_writable
from b64codec.config import BASIC, CodecConfig
from b64codec.exceptions import OutputTooSmallError
from b64codec.length import encoded_length


class Encoder:
    """Encoder for byte data using the Base64 encoding scheme.

    Instances hold nothing but an immutable ``CodecConfig`` and are safe for
    use by multiple concurrent threads.

    Example:
        >>> Encoder().encode(b"Man")
        b'TWFu'
    """

    def __init__(self, config: CodecConfig = BASIC) -> None:
        """Initialize the encoder.

        Args:
            config: The codec configuration to encode with.
        """
        self._config = config

    @property
    def config(self) -> CodecConfig:
        return self._config

    def __repr__(self) -> str:
        return f"Encoder({self._config!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Encoder):
            return NotImplemented
        return self._config == other._config

    def __hash__(self) -> int:
        return hash(self._config)

    def encoded_length(self, source_length: int) -> int:
        """Get the number of bytes ``source_length`` input bytes encode to."""
        return encoded_length(self._config, source_length)

    def encode(self, source: BytesLike) -> bytes:
        """Encode all bytes into a newly allocated, exactly sized result.

        Args:
            source: The bytes to encode.

        Returns:
            The encoded bytes.
        """
        data = as_bytes(source)
        out = bytearray(encoded_length(self._config, len(data)))
        self._encode(data, out)
        return bytes(out)

    def encode_into(self, source: BytesLike, out: BytesLike) -> int:
        """Encode all bytes into a caller-supplied buffer, starting at offset 0.

        Nothing is written when the buffer is too small.

        Args:
            source: The bytes to encode.
            out: A writable buffer.

        Returns:
            The number of bytes written to ``out``.

        Raises:
            OutputTooSmallError: If ``out`` cannot hold the encoded result.
        """
        data = as_bytes(source)
        view = as_writable(out)
        required = encoded_length(self._config, len(data))
        if len(view) < required:
            raise OutputTooSmallError(
                f"Output buffer is too small for encoding all input bytes: {len(view)} < {required}"
            )
        return self._encode(data, view)

    def encode_to_string(self, source: BytesLike) -> str:
        """Encode all bytes into an ASCII string."""
        return self.encode(source).decode("ascii")

    def without_padding(self) -> Encoder:
        """Get an encoder that encodes like this one but adds no padding.

        Returns:
            This encoder if it already omits padding, otherwise a new one.
        """
        config = self._config.without_padding()
        if config is self._config:
            return self
        return Encoder(config)

    def _encode(self, source: BytesLike, out: BytesLike) -> int:
        config = self._config
        table = config.alphabet.forward
        separator = config.line_separator
        source_length = len(source)

        full_length = source_length // 3 * 3
        run_length = full_length
        if config.wraps_lines and run_length > config.line_max // 4 * 3:
            run_length = config.line_max // 4 * 3

        sp = 0
        dp = 0
        while sp < full_length:
            run_end = min(sp + run_length, full_length)
            for i in range(sp, run_end, 3):
                bits = source[i] << 16 | source[i + 1] << 8 | source[i + 2]
                out[dp] = table[(bits >> 18) & 0x3F]
                out[dp + 1] = table[(bits >> 12) & 0x3F]
                out[dp + 2] = table[(bits >> 6) & 0x3F]
                out[dp + 3] = table[bits & 0x3F]
                dp += 4
            line_length = (run_end - sp) // 3 * 4
            sp = run_end
            if line_length == config.line_max and sp < source_length:
                out[dp : dp + len(separator)] = separator
                dp += len(separator)

        # 1 or 2 leftover bytes
        if sp < source_length:
            b0 = source[sp]
            sp += 1
            out[dp] = table[b0 >> 2]
            dp += 1
            if sp == source_length:
                out[dp] = table[(b0 << 4) & 0x3F]
                dp += 1
                if config.padding:
                    out[dp] = PAD_BYTE
                    out[dp + 1] = PAD_BYTE
                    dp += 2
            else:
                b1 = source[sp]
                out[dp] = table[(b0 << 4) & 0x3F | (b1 >> 4)]
                out[dp + 1] = table[(b1 << 2) & 0x3F]
                dp += 2
                if config.padding:
                    out[dp] = PAD_BYTE
                    dp += 1
        return dp
