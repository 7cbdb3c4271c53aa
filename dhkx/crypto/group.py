"""DH groups: key pair generation and shared secret computation."""

import secrets
from typing import Callable, Optional

from dhkx.crypto.errors import (
    InvalidGroupError, InvalidPublicKeyError, PublicKeyOutOfRangeError,
    InvalidPrivateKeyError, RandomSourceError
)
from dhkx.crypto.key import DHKey


RandReader = Callable[[int], bytes]


def rand_int(rand_reader: RandReader, upper: int) -> int:
    """Draw a uniform random integer in [0, upper).

    Reads just enough bytes for bitlen(upper - 1) bits, masks off the extra
    high bits and redraws until the result is below upper.

    Args:
        rand_reader: Callable returning n random bytes
        upper: Exclusive upper bound (must be positive)

    Returns:
        Random integer in [0, upper)

    Raises:
        RandomSourceError if the reader fails or returns too few bytes
    """
    if upper <= 0:
        raise ValueError("upper bound must be positive")
    k = (upper - 1).bit_length()
    if k == 0:
        return 0
    nbytes = (k + 7) // 8
    b = k % 8
    if b == 0:
        b = 8

    while True:
        try:
            buf = rand_reader(nbytes)
        except Exception as e:
            raise RandomSourceError(f"Failed to read from random source: {e}") from e
        if buf is None or len(buf) < nbytes:
            got = 0 if buf is None else len(buf)
            raise RandomSourceError(f"Random source returned {got} bytes, expected {nbytes}")

        # Clear bits in the first byte to increase the probability
        # that the candidate is < upper.
        candidate = bytearray(buf[:nbytes])
        candidate[0] &= (1 << b) - 1
        n = int.from_bytes(candidate, byteorder='big')
        if n < upper:
            return n


class DHGroup:
    """A finite cyclic group given by a prime modulus p and generator g."""

    __slots__ = ("_p", "_g", "_group_id")

    def __init__(self, prime: Optional[int], generator: Optional[int], group_id=None):
        """Initialize group.

        Args:
            prime: Prime modulus p
            generator: Generator g
            group_id: Registry ID when the group came from the registry
        """
        self._p = prime
        self._g = generator
        self._group_id = group_id

    @property
    def prime(self) -> Optional[int]:
        return self._p

    @property
    def generator(self) -> Optional[int]:
        return self._g

    # Short aliases in the usual DH notation.
    p = prime
    g = generator

    @property
    def group_id(self):
        return self._group_id

    def generate_private_key(self, rand_reader: Optional[RandReader] = None) -> DHKey:
        """Generate a fresh key pair in this group.

        Args:
            rand_reader: Callable returning n random bytes
                (default: secrets.token_bytes)

        Returns:
            DHKey with x in (0, p) and y = g^x mod p

        Raises:
            InvalidGroupError if the group has no usable prime or generator
            RandomSourceError if the random source fails
        """
        if rand_reader is None:
            rand_reader = secrets.token_bytes
        if self._p is None or self._p < 2 or self._g is None:
            raise InvalidGroupError("DH: invalid group")

        # x should be in (0, p); zero is astronomically unlikely for real
        # primes, so redraw instead of shifting the range.
        x = rand_int(rand_reader, self._p)
        while x == 0:
            x = rand_int(rand_reader, self._p)

        # y = g ^ x mod p
        y = pow(self._g, x, self._p)
        return DHKey(x=x, y=y, group=self)

    def compute_key(self, pubkey: DHKey, privkey: DHKey) -> DHKey:
        """Compute the shared secret from the peer's public key and our key.

        Args:
            pubkey: Peer key (public-only or full)
            privkey: Own key, must hold a private exponent

        Returns:
            Public-only DHKey whose y is the shared secret

        Raises:
            InvalidGroupError if the group has no prime
            InvalidPublicKeyError if the peer key has no public value
            PublicKeyOutOfRangeError if the peer public value is not in (0, p)
            InvalidPrivateKeyError if privkey has no private exponent
        """
        if self._p is None:
            raise InvalidGroupError("DH: invalid group")
        if pubkey.y is None:
            raise InvalidPublicKeyError("DH: invalid public key")
        if pubkey.y <= 0 or pubkey.y >= self._p:
            raise PublicKeyOutOfRangeError("DH parameter out of bounds")
        if privkey.x is None:
            raise InvalidPrivateKeyError("DH: invalid private key")

        k = pow(pubkey.y, privkey.x, self._p)
        return DHKey(y=k, group=self)

    def __eq__(self, other):
        if not isinstance(other, DHGroup):
            return NotImplemented
        return self._p == other._p and self._g == other._g

    def __hash__(self):
        return hash((self._p, self._g))

    def __repr__(self):
        bits = self._p.bit_length() if self._p is not None else 0
        if self._group_id is not None:
            return f"DHGroup(id={int(self._group_id)}, bits={bits}, g={self._g})"
        return f"DHGroup(bits={bits}, g={self._g})"


def create_group(prime: int, generator: int) -> DHGroup:
    """Create a custom DH group.

    Most callers should use registry.get_group, which supplies the groups
    defined in RFC 2409 and RFC 3526.

    WARNING: neither the primality of prime nor the order of generator is
    checked. The behavior of the returned group is undefined if prime is
    not in fact prime.

    Args:
        prime: Prime modulus p
        generator: Generator g

    Returns:
        DHGroup for (prime, generator)
    """
    return DHGroup(prime, generator)
