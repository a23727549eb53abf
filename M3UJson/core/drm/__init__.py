# 19.10.26

from .codec import base64_to_hex, KeyDecodeError

__all__ = [
    "base64_to_hex",
    "KeyDecodeError"
]
