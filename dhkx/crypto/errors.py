"""Exceptions raised by the DH group, key and registry helpers."""


class DHError(Exception):
    """Base class for all Diffie-Hellman errors."""
    pass


class UnknownGroupError(DHError):
    """Exception raised when a group ID is not in the registry."""
    pass


class RandomSourceError(DHError):
    """Exception raised when the random source fails to deliver bytes."""
    pass


class InvalidGroupError(DHError):
    """Exception raised when a group has no usable prime."""
    pass


class InvalidPublicKeyError(DHError):
    """Exception raised when a peer key carries no public value."""
    pass


class PublicKeyOutOfRangeError(InvalidPublicKeyError):
    """Exception raised when a peer public value is outside (0, p)."""
    pass


class InvalidPrivateKeyError(DHError):
    """Exception raised when a key has no private exponent."""
    pass
