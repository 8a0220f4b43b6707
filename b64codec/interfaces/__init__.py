"""b64codec interfaces package.

This package provides protocol definitions for Base64 encoders and decoders.
"""

from .codec import IDecoder, IEncoder

__all__ = [
    "IDecoder",
    "IEncoder",
]
