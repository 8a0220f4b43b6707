"""Tests for the Base64 decoder."""

from __future__ import annotations

import base64
import random

import pytest

from b64codec.config import BASIC, MIME, URL_SAFE
from b64codec.decoder import Decoder
from b64codec.encoder import Encoder
from b64codec.exceptions import (
    Base64Error,
    InvalidInputError,
    InvalidLengthError,
    OutputTooSmallError,
)


def sample(length: int, seed: int = 0) -> bytes:
    """Build deterministic pseudo-random bytes."""
    rng = random.Random(seed)
    return bytes(rng.getrandbits(8) for _ in range(length))


@pytest.fixture
def decoder() -> Decoder:
    """Create a Basic decoder.

    Returns:
        Decoder instance.
    """
    return Decoder(BASIC)


@pytest.fixture
def mime_decoder() -> Decoder:
    """Create a MIME decoder.

    Returns:
        Decoder instance.
    """
    return Decoder(MIME)


@pytest.mark.parametrize(
    "source, expected",
    [
        (b"", b""),
        (b"TQ==", b"M"),
        (b"TWE=", b"Ma"),
        (b"TWFu", b"Man"),
        (b"Zm9vYmFy", b"foobar"),
        (b"////", b"\xff\xff\xff"),
    ],
)
def test_decodes_known_vectors(decoder: Decoder, source: bytes, expected: bytes) -> None:
    """Known RFC 4648 vectors decode as expected."""
    assert decoder.decode(source) == expected


def test_decodes_text(decoder: Decoder) -> None:
    """Text input is read one byte per character."""
    assert decoder.decode("TWFu") == b"Man"
    assert decoder.decode("TWE") == b"Ma"


def test_rejects_text_beyond_latin1(decoder: Decoder) -> None:
    """Characters that do not fit in a single byte are illegal."""
    with pytest.raises(InvalidInputError) as exc_info:
        decoder.decode("TW€u")

    assert "position 2" in str(exc_info.value)


@pytest.mark.parametrize(
    "padded, unpadded",
    [(b"TQ==", b"TQ"), (b"TWE=", b"TWE"), (b"Zm9vYg==", b"Zm9vYg"), (b"Zm9vYmE=", b"Zm9vYmE")],
)
def test_padding_is_optional(decoder: Decoder, padded: bytes, unpadded: bytes) -> None:
    """Stripping the trailing padding does not change the decoded bytes."""
    assert decoder.decode(unpadded) == decoder.decode(padded)


@pytest.mark.parametrize("length", [0, 1, 2, 3, 4, 5, 57, 58, 100, 1000])
def test_round_trip(length: int) -> None:
    """Decoding the encoder's output returns the original bytes for every variant."""
    data = sample(length, seed=length)

    for config in (BASIC, URL_SAFE, MIME):
        encoder = Encoder(config)
        decoder = Decoder(config)
        assert decoder.decode(encoder.encode(data)) == data
        assert decoder.decode(encoder.without_padding().encode(data)) == data


@pytest.mark.parametrize("length", [1, 2, 3, 50, 51, 52])
def test_url_safe_matches_standard_library(length: int) -> None:
    """URL-safe decoding agrees with the standard library."""
    data = sample(length, seed=length + 100)
    encoded = base64.urlsafe_b64encode(data)

    assert Decoder(URL_SAFE).decode(encoded) == data


def test_url_safe_rejects_standard_characters() -> None:
    """'+' and '/' are outside the URL-safe alphabet."""
    with pytest.raises(InvalidInputError):
        Decoder(URL_SAFE).decode(b"+/8=")

    assert Decoder(URL_SAFE).decode(b"-_8=") == b"\xfb\xff"


def test_rejects_illegal_character(decoder: Decoder) -> None:
    """A non-alphabet byte is reported with its value and position."""
    with pytest.raises(InvalidInputError) as exc_info:
        decoder.decode(b"TW Fu")

    assert "0x20" in str(exc_info.value)
    assert "position 2" in str(exc_info.value)


@pytest.mark.parametrize("source", [b"TQ=", b"TQ=A", b"=AAA", b"TWFu=", b"TWFu====", b"TQ==TQ=="])
def test_rejects_malformed_padding(decoder: Decoder, source: bytes) -> None:
    """Padding in the wrong place or in the wrong amount is rejected."""
    with pytest.raises(InvalidInputError):
        decoder.decode(source)


def test_rejects_dangling_character(decoder: Decoder) -> None:
    """A final unit with a single character does not carry a whole byte."""
    with pytest.raises(InvalidInputError) as exc_info:
        decoder.decode(b"TWFuT")

    assert "enough valid bits" in str(exc_info.value)

    with pytest.raises(InvalidInputError):
        decoder.decode(b"TWFuT===")


def test_rejects_bytes_after_padding(decoder: Decoder) -> None:
    """Nothing may follow the padding outside MIME mode."""
    with pytest.raises(InvalidInputError) as exc_info:
        decoder.decode(b"TWE=\n")

    assert "ending byte" in str(exc_info.value)


def test_rejects_single_byte(decoder: Decoder) -> None:
    """A single byte is too short to be Base64."""
    with pytest.raises(InvalidLengthError):
        decoder.decode(b"T")


def test_errors_are_value_errors(decoder: Decoder) -> None:
    """All codec errors share a ValueError base."""
    with pytest.raises(ValueError):
        decoder.decode(b"!!!!")

    with pytest.raises(Base64Error):
        decoder.decode(b"T")


def test_mime_skips_non_alphabet_bytes(mime_decoder: Decoder) -> None:
    """MIME decoding ignores spaces and line separators."""
    assert mime_decoder.decode(b"TW Fu\r\n") == b"Man"
    assert mime_decoder.decode("TW\tF\nu") == b"Man"


def test_mime_inserted_bytes_do_not_change_result(mime_decoder: Decoder) -> None:
    """Inserting stray bytes between groups yields the same decoded bytes."""
    data = sample(90, seed=11)
    encoded = base64.b64encode(data)
    noisy = b"\r\n".join(encoded[i : i + 4] for i in range(0, len(encoded), 4))
    noisy = b"*" + noisy.replace(b"AA", b"A.A") + b" \r\n"

    assert mime_decoder.decode(noisy) == mime_decoder.decode(encoded) == data


def test_mime_tolerates_stray_bytes_after_padding(mime_decoder: Decoder) -> None:
    """Non-alphabet bytes after the padding are ignored in MIME mode."""
    assert mime_decoder.decode(b"TWE=\r\n") == b"Ma"
    assert mime_decoder.decode(b"TQ==\r\n=") == b"M"


def test_mime_rejects_data_after_padding(mime_decoder: Decoder) -> None:
    """Alphabet bytes after the padding are still illegal in MIME mode."""
    with pytest.raises(InvalidInputError):
        mime_decoder.decode(b"TQ==\r\nTWFu")


def test_mime_single_stray_byte_is_empty(mime_decoder: Decoder) -> None:
    """A lone non-alphabet byte decodes to nothing in MIME mode."""
    assert mime_decoder.decode(b"\n") == b""


def test_mime_result_is_exactly_sized(mime_decoder: Decoder) -> None:
    """The result is trimmed to the bytes actually decoded."""
    result = mime_decoder.decode(b"TW\r\nFu\r\n\r\n")

    assert result == b"Man"
    assert mime_decoder.decoded_length(b"TW\r\nFu\r\n\r\n") == 3


def test_decode_into_buffer(decoder: Decoder) -> None:
    """Decoding into a larger buffer writes from offset 0 and reports the count."""
    out = bytearray(b"\xaa" * 5)

    written = decoder.decode_into("TWE=", out)

    assert written == 2
    assert out == bytearray(b"Ma\xaa\xaa\xaa")


def test_decode_into_too_small_buffer_writes_nothing(decoder: Decoder) -> None:
    """A short buffer is rejected before any byte is written."""
    out = bytearray(2)

    with pytest.raises(OutputTooSmallError):
        decoder.decode_into(b"TWFu", out)

    assert out == bytearray(2)


def test_decode_into_may_write_before_failing(decoder: Decoder) -> None:
    """Invalid input can leave partial output in a caller-supplied buffer."""
    out = bytearray(6)

    with pytest.raises(InvalidInputError):
        decoder.decode_into(b"TWFu!!!!", out)

    assert out[:3] == b"Man"


@pytest.mark.parametrize("length", list(range(0, 40)) + [255, 256, 257])
def test_decoded_length_is_exact(length: int) -> None:
    """The precomputed length equals the decoded size, padded or not."""
    data = sample(length, seed=length + 200)

    for config in (BASIC, URL_SAFE):
        decoder = Decoder(config)
        for encoder in (Encoder(config), Encoder(config).without_padding()):
            encoded = encoder.encode(data)
            assert decoder.decoded_length(encoded) == len(decoder.decode(encoded)) == length
