"""DH key pairs and public value (de)serialization."""

from typing import Optional

from dhkx.crypto.errors import InvalidGroupError


def copy_with_left_pad(size: int, src: bytes) -> bytes:
    """Right-align src in a zero-filled buffer of the given size.

    Args:
        size: Length of the output buffer
        src: Bytes to copy into the end of the buffer

    Returns:
        src left-padded with zero bytes up to size
    """
    if len(src) >= size:
        return src
    return b'\x00' * (size - len(src)) + src


def int_to_bytes(value: int) -> bytes:
    """Minimal big-endian encoding of a non-negative integer (0 -> b'')."""
    return value.to_bytes((value.bit_length() + 7) // 8, byteorder='big')


class DHKey:
    """A DH key: private exponent x (optional), public value y, owning group.

    A key with x set is a full key pair. A key built from received bytes
    only has y, and usually no group.
    """

    __slots__ = ("_x", "_y", "_group")

    def __init__(self, x: Optional[int] = None, y: Optional[int] = None, group=None):
        """Initialize key.

        Args:
            x: Private exponent, or None for a public-only key
            y: Public value
            group: DHGroup the key belongs to (shared, not copied)
        """
        self._x = x
        self._y = y
        self._group = group

    @property
    def x(self) -> Optional[int]:
        return self._x

    @property
    def y(self) -> Optional[int]:
        return self._y

    @property
    def group(self):
        return self._group

    def is_private_key(self) -> bool:
        """Return True if the key holds a private exponent."""
        return self._x is not None

    def marshal_public_key(self) -> bytes:
        """Serialize the public value as big-endian bytes.

        With a group the output is always ceil(bitlen(p) / 8) bytes so every
        public value of that group has the same length on the wire. Without
        a group the minimal encoding is used.

        Returns:
            Serialized public value (empty if no public value is set)

        Raises:
            InvalidGroupError if the key's group has no prime
        """
        if self._y is None:
            return b''
        if self._group is not None:
            if self._group.prime is None:
                raise InvalidGroupError("DH: invalid group")
            # len = ceil(bitlen(p) / 8)
            blen = (self._group.prime.bit_length() + 7) // 8
            return copy_with_left_pad(blen, int_to_bytes(self._y))
        return int_to_bytes(self._y)

    def marshal_public_key_string(self) -> str:
        """Decimal string of the public value, for display only."""
        if self._y is None:
            return ""
        return str(self._y)

    def __eq__(self, other):
        if not isinstance(other, DHKey):
            return NotImplemented
        return (self._x, self._y, self._group) == (other._x, other._y, other._group)

    def __hash__(self):
        return hash((self._x, self._y, self._group))

    def __repr__(self):
        kind = "private" if self.is_private_key() else "public"
        return f"DHKey({kind}, y={self.marshal_public_key_string()[:16]}..., group={self._group!r})"


def new_public_key(data: bytes) -> DHKey:
    """Build a public-only key from big-endian bytes received from a peer.

    No range check is done here; DHGroup.compute_key validates the value
    against the group.

    Args:
        data: Unsigned big-endian public value (may be empty)

    Returns:
        Public-only DHKey without a group
    """
    return DHKey(y=int.from_bytes(data, byteorder='big'))
