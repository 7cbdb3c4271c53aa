"""Conversions between dhkx groups/keys and cryptography's DH objects."""

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import dh

from dhkx.crypto.errors import InvalidGroupError, InvalidPrivateKeyError, InvalidPublicKeyError
from dhkx.crypto.group import DHGroup, create_group
from dhkx.crypto.key import DHKey


def to_parameter_numbers(group: DHGroup) -> dh.DHParameterNumbers:
    """Convert a group to cryptography's DHParameterNumbers.

    Args:
        group: DH group

    Returns:
        DHParameterNumbers(p, g)

    Raises:
        InvalidGroupError if cryptography rejects the parameters
    """
    if group.prime is None or group.generator is None:
        raise InvalidGroupError("DH: invalid group")
    try:
        return dh.DHParameterNumbers(group.prime, group.generator)
    except (TypeError, ValueError) as e:
        raise InvalidGroupError(f"DH: group not representable: {e}") from e


def from_parameter_numbers(numbers: dh.DHParameterNumbers) -> DHGroup:
    """Build a custom group from cryptography's DHParameterNumbers."""
    return create_group(numbers.p, numbers.g)


def to_private_key(key: DHKey) -> dh.DHPrivateKey:
    """Convert a full key pair to a cryptography DHPrivateKey.

    Args:
        key: DHKey with private exponent and group

    Returns:
        cryptography DHPrivateKey

    Raises:
        InvalidPrivateKeyError if the key has no private exponent or group
    """
    if not key.is_private_key() or key.group is None:
        raise InvalidPrivateKeyError("DH: invalid private key")
    pn = to_parameter_numbers(key.group)
    public_numbers = dh.DHPublicNumbers(key.y, pn)
    try:
        return dh.DHPrivateNumbers(key.x, public_numbers).private_key()
    except ValueError as e:
        raise InvalidPrivateKeyError(f"DH: private key rejected: {e}") from e


def to_public_key(key: DHKey, group: DHGroup = None) -> dh.DHPublicKey:
    """Convert a key's public value to a cryptography DHPublicKey.

    Args:
        key: DHKey with a public value
        group: Group to use when the key carries none

    Returns:
        cryptography DHPublicKey

    Raises:
        InvalidGroupError if no group is known
        InvalidPublicKeyError if the key has no public value or is rejected
    """
    group = group if group is not None else key.group
    if group is None:
        raise InvalidGroupError("DH: public key has no group")
    if key.y is None:
        raise InvalidPublicKeyError("DH: invalid public key")
    pn = to_parameter_numbers(group)
    try:
        return dh.DHPublicNumbers(key.y, pn).public_key()
    except ValueError as e:
        raise InvalidPublicKeyError(f"DH: public key rejected: {e}") from e


def from_cryptography_key(key) -> DHKey:
    """Convert a cryptography DHPrivateKey or DHPublicKey to a DHKey.

    The resulting key references a custom group built from the key's
    parameters.
    """
    if isinstance(key, dh.DHPrivateKey):
        numbers = key.private_numbers()
        pn = numbers.public_numbers.parameter_numbers
        return DHKey(x=numbers.x, y=numbers.public_numbers.y, group=from_parameter_numbers(pn))
    if isinstance(key, dh.DHPublicKey):
        numbers = key.public_numbers()
        return DHKey(y=numbers.y, group=from_parameter_numbers(numbers.parameter_numbers))
    raise TypeError(f"Expected a DH key, got {type(key).__name__}")


def parameters_to_pem(group: DHGroup) -> bytes:
    """Serialize a group as DH parameters in PEM.

    PKCS#3 is requested, but OpenSSL recognises the RFC 3526 primes
    (groups 14 and 15) and attaches the subgroup order q, in which case
    the output is an "X9.42 DH PARAMETERS" block. group_from_pem reads
    both forms.

    Args:
        group: DH group

    Returns:
        PEM encoded "DH PARAMETERS" or "X9.42 DH PARAMETERS" block
    """
    params = to_parameter_numbers(group).parameters()
    return params.parameter_bytes(
        serialization.Encoding.PEM,
        serialization.ParameterFormat.PKCS3
    )


def group_from_pem(pem_data: bytes) -> DHGroup:
    """Load a group from PEM encoded DH parameters.

    Raises:
        InvalidGroupError if the data is not DH parameters
    """
    try:
        params = serialization.load_pem_parameters(pem_data)
    except ValueError as e:
        raise InvalidGroupError(f"DH: failed to parse parameters: {e}") from e
    if not isinstance(params, dh.DHParameters):
        raise InvalidGroupError("DH: PEM does not contain DH parameters")
    return from_parameter_numbers(params.parameter_numbers())
