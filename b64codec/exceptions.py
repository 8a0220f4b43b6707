"""Exception classes for b64codec.

This module defines the error taxonomy raised by the encoder, the decoder
and the configuration selectors.
"""


class Base64Error(ValueError):
    """Base exception class for all b64codec errors."""

    pass


class InvalidArgumentError(Base64Error):
    """Exception raised when a codec is constructed from malformed arguments."""

    pass


class InvalidLengthError(Base64Error):
    """Exception raised when the input is too short to be valid Base64."""

    pass


class InvalidInputError(Base64Error):
    """Exception raised for illegal characters, padding or trailing bytes."""

    pass


class OutputTooSmallError(Base64Error):
    """Exception raised when a caller-supplied buffer cannot hold the result."""

    pass
