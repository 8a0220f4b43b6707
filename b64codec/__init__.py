"""Base64 codec for Python.

This package implements the Base64 encoding scheme of RFC 4648 and RFC 2045:
the Basic and URL and Filename safe alphabets, optional padding, and
line-wrapped MIME output with tolerant decoding.

Main Components:
    - Base64: Selectors for the pre-built encoders and decoders
    - Encoder: Packs bytes into 6-bit groups
    - Decoder: Unpacks and validates Base64 input
    - CodecConfig: Immutable codec configuration

Example:
    >>> from b64codec import Base64
    >>> Base64.get_encoder().encode(b"Man")
    b'TWFu'
    >>> Base64.get_decoder().decode("TWE")
    b'Ma'
"""

from b64codec.alphabet import Alphabet
from b64codec.base64 import (
    Base64,
    b64decode,
    b64encode,
    urlsafe_b64decode,
    urlsafe_b64encode,
)
from b64codec.config import BASIC, MIME, URL_SAFE, CodecConfig
from b64codec.decoder import Decoder
from b64codec.encoder import Encoder
from b64codec.exceptions import (
    Base64Error,
    InvalidArgumentError,
    InvalidInputError,
    InvalidLengthError,
    OutputTooSmallError,
)

__version__ = "0.1.0"

__all__ = [
    # Selectors
    "Base64",
    "b64encode",
    "b64decode",
    "urlsafe_b64encode",
    "urlsafe_b64decode",
    # Codec
    "Encoder",
    "Decoder",
    # Configuration
    "Alphabet",
    "CodecConfig",
    "BASIC",
    "URL_SAFE",
    "MIME",
    # Exceptions
    "Base64Error",
    "InvalidArgumentError",
    "InvalidLengthError",
    "InvalidInputError",
    "OutputTooSmallError",
]
