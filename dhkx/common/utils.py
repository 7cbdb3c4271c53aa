"""Helper signatures: b64e, b64d."""

import base64


def b64e(b: bytes) -> str:
    """Encode bytes as a base64 ASCII string."""
    return base64.b64encode(b).decode('ascii')


def b64d(s: str) -> bytes:
    """Decode a base64 string, rejecting non-alphabet characters."""
    return base64.b64decode(s, validate=True)
