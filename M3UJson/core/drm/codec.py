# 19.10.26

import base64


class KeyDecodeError(ValueError):
    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot decode base64 value {value!r}: {reason}")


def base64_to_hex(value: str) -> str:
    """
    Decode a standard base64 string, padded or not, into lowercase hex.

    Parameters:
        value (str): Base64 text as found in ClearKey JSON (``kid`` / ``k``).

    Returns:
        str: Hex representation of the decoded bytes.

    Raises:
        KeyDecodeError: On characters outside the alphabet or an impossible length.
    """
    missing_padding = len(value) % 4
    if missing_padding:
        value += "=" * (4 - missing_padding)

    try:
        decoded = base64.b64decode(value, validate=True)
    except ValueError as e:
        raise KeyDecodeError(value, str(e)) from e

    return decoded.hex()
