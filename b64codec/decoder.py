"""Base64 decoder.

The padding character ``=`` is accepted and interpreted as the end of the
encoded data, but it is not required: a final unit of two or three
characters without padding decodes as if the padding were present. If a
padding character is present in the final unit, the correct number of
padding characters must be present, otherwise ``InvalidInputError`` is
raised.

In MIME mode every byte outside the alphabet (line separators included) is
ignored.
"""

from __future__ import annotations

from b64codec.alphabet import PAD_BYTE, PADDING
from b64codec.buffers import BytesLike, as_bytes, as_writable
from b64codec.config import BASIC, CodecConfig
from b64codec.exceptions import InvalidInputError, OutputTooSmallError
from b64codec.length import decoded_length

Source = BytesLike | str


class Decoder:
    """Decoder for byte data using the Base64 encoding scheme.

    Instances hold nothing but an immutable ``CodecConfig`` and are safe for
    use by multiple concurrent threads.

    Example:
        >>> Decoder().decode("TWE")
        b'Ma'
    """

    def __init__(self, config: CodecConfig = BASIC) -> None:
        """Initialize the decoder.

        Args:
            config: The codec configuration to decode with.
        """
        self._config = config

    @property
    def config(self) -> CodecConfig:
        return self._config

    def __repr__(self) -> str:
        return f"Decoder({self._config!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Decoder):
            return NotImplemented
        return self._config == other._config

    def __hash__(self) -> int:
        return hash(self._config)

    def decoded_length(self, source: Source) -> int:
        """Get the number of bytes ``source`` decodes to (an upper bound in MIME mode)."""
        return decoded_length(self._config, _source_bytes(source))

    def decode(self, source: Source) -> bytes:
        """Decode all bytes into a newly allocated, exactly sized result.

        A ``str`` source is read one byte per character (latin-1).

        Args:
            source: The Base64 input.

        Returns:
            The decoded bytes.

        Raises:
            InvalidLengthError: If the input is too short.
            InvalidInputError: If the input is not valid Base64.
        """
        data = _source_bytes(source)
        out = bytearray(decoded_length(self._config, data))
        written = self._decode(data, out)
        if written != len(out):
            del out[written:]
        return bytes(out)

    def decode_into(self, source: Source, out: BytesLike) -> int:
        """Decode all bytes into a caller-supplied buffer, starting at offset 0.

        Nothing is written when the buffer is too small. When the input is
        invalid some bytes may already have been written before the error is
        raised.

        Args:
            source: The Base64 input.
            out: A writable buffer.

        Returns:
            The number of bytes written to ``out``.

        Raises:
            OutputTooSmallError: If ``out`` cannot hold the decoded result.
            InvalidLengthError: If the input is too short.
            InvalidInputError: If the input is not valid Base64.
        """
        data = _source_bytes(source)
        view = as_writable(out)
        required = decoded_length(self._config, data)
        if len(view) < required:
            raise OutputTooSmallError(
                f"Output buffer is too small for decoding all input bytes: {len(view)} < {required}"
            )
        return self._decode(data, view)

    def _decode(self, source: BytesLike, out: BytesLike) -> int:
        inverse = self._config.alphabet.inverse
        mime = self._config.mime
        source_length = len(source)

        sp = 0
        dp = 0
        bits = 0
        shift_to = 18  # position of the first character of a 4-character atom
        while sp < source_length:
            b = source[sp]
            sp += 1
            value = inverse[b]
            if value < 0:
                if value == PADDING:
                    # =     shift_to == 18 unnecessary padding
                    # x=    shift_to == 12 dangling single x, rejected below
                    # xx=   shift_to == 6 and at the end, missing last =
                    # xx=y  shift_to == 6 and last is not =
                    if shift_to == 18 or (
                        shift_to == 6 and (sp == source_length or source[sp] != PAD_BYTE)
                    ):
                        raise InvalidInputError("Input has wrong 4-byte ending unit")
                    if shift_to == 6:
                        sp += 1
                    break
                if mime:
                    continue
                raise InvalidInputError(f"Illegal base64 character 0x{b:02x} at position {sp - 1}")

            bits |= value << shift_to
            shift_to -= 6
            if shift_to < 0:
                out[dp] = (bits >> 16) & 0xFF
                out[dp + 1] = (bits >> 8) & 0xFF
                out[dp + 2] = bits & 0xFF
                dp += 3
                shift_to = 18
                bits = 0

        # reached the end of the input or hit the padding
        if shift_to == 6:
            out[dp] = (bits >> 16) & 0xFF
            dp += 1
        elif shift_to == 0:
            out[dp] = (bits >> 16) & 0xFF
            out[dp + 1] = (bits >> 8) & 0xFF
            dp += 2
        elif shift_to == 12:
            raise InvalidInputError("Last unit does not have enough valid bits")

        # anything left is invalid, except non-alphabet bytes in MIME mode
        while sp < source_length:
            b = source[sp]
            sp += 1
            if mime and inverse[b] < 0:
                continue
            raise InvalidInputError(f"Input has incorrect ending byte 0x{b:02x} at position {sp - 1}")
        return dp


def _source_bytes(source: Source) -> BytesLike:
    if isinstance(source, str):
        try:
            return source.encode("latin-1")
        except UnicodeEncodeError as e:
            raise InvalidInputError(
                f"Illegal base64 character {source[e.start]!r} at position {e.start}"
            ) from e
    return as_bytes(source)
