#!/usr/bin/env python3
"""Test key generation and shared secret agreement."""

import sys

from dhkx.crypto.errors import RandomSourceError, InvalidGroupError
from dhkx.crypto.group import create_group
from dhkx.crypto.key import new_public_key
from dhkx.crypto.registry import get_group, GroupID


# Not a registry group; taken as an arbitrary 768-bit modulus.
CUSTOM_P = int(
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74"
    "020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F1437"
    "4FE1356D6D51C245E485B576625E7EC6F44C42E9A63A36210000000000090563",
    16
)


class Peer:
    """One side of an exchange: own key pair plus the received public key."""

    def __init__(self, group):
        self.group = group
        self.priv = group.generate_private_key()
        self.pub = None

    def get_pub_key(self) -> bytes:
        return self.priv.marshal_public_key()

    def recv_peer_pub_key(self, data: bytes):
        self.pub = new_public_key(data)

    def get_key(self) -> bytes:
        return self.group.compute_key(self.pub, self.priv).marshal_public_key()


def exchange_key(p1: Peer, p2: Peer):
    """Swap public values and return both derived secrets."""
    pub1 = p1.get_pub_key()
    pub2 = p2.get_pub_key()

    p1.recv_peer_pub_key(pub2)
    p2.recv_peer_pub_key(pub1)

    return p1.get_key(), p2.get_key()


def test_key_exchange():
    group = get_group(GroupID.ID14)
    key1, key2 = exchange_key(Peer(group), Peer(group))
    assert key1 == key2
    assert len(key1) == 256


def test_key_exchange_all_registry_groups():
    for group_id in (GroupID.ID1, GroupID.ID2, GroupID.ID14, GroupID.ID15):
        group = get_group(group_id)
        key1, key2 = exchange_key(Peer(group), Peer(group))
        assert key1 == key2, f"group {int(group_id)} secrets differ"


def test_custom_group_key_exchange():
    group = create_group(CUSTOM_P, 2)
    key1, key2 = exchange_key(Peer(group), Peer(group))
    assert key1 == key2


def test_generated_key_is_consistent():
    group = get_group(GroupID.ID2)
    key = group.generate_private_key()
    assert key.is_private_key()
    assert 0 < key.x < group.prime
    assert key.y == pow(group.generator, key.x, group.prime)
    assert key.group is group


def test_p_is_not_mutable():
    group = get_group(GroupID.DEFAULT)
    p = group.prime
    p_copy = group.prime
    p_copy += 1
    assert group.prime == p
    try:
        group.prime = 1
    except AttributeError:
        pass
    else:
        raise AssertionError("prime should be read-only")
    assert get_group(GroupID.DEFAULT).prime == p


def test_g_is_not_mutable():
    group = get_group(GroupID.DEFAULT)
    g = group.generator
    g_copy = group.generator
    g_copy -= 2
    assert group.generator == g == 2
    try:
        group.generator = 0
    except AttributeError:
        pass
    else:
        raise AssertionError("generator should be read-only")


def test_zero_exponent_is_redrawn():
    group = get_group(GroupID.ID14)
    calls = []

    def biased_reader(n):
        calls.append(n)
        if len(calls) <= 5:
            return b'\x00' * n
        return b'\x00' * (n - 1) + b'\x05'

    key = group.generate_private_key(biased_reader)
    assert key.x == 5
    assert key.y == 32
    assert len(calls) == 6
    assert all(n == 256 for n in calls)


def test_out_of_range_draws_are_redrawn():
    group = create_group(23, 5)
    draws = iter([b'\x1f', b'\x17', b'\x16'])  # 31 and 23 are >= p

    key = group.generate_private_key(lambda n: next(draws))
    assert key.x == 22
    assert key.y == pow(5, 22, 23)


def test_random_source_failure():
    group = get_group(GroupID.ID14)

    calls = []

    def failing_reader(n):
        calls.append(n)
        raise OSError("entropy unavailable")

    try:
        group.generate_private_key(failing_reader)
    except RandomSourceError as e:
        assert isinstance(e.__cause__, OSError)
    else:
        raise AssertionError("expected RandomSourceError")
    assert len(calls) == 1


def test_random_source_failure_during_zero_redraw():
    group = get_group(GroupID.ID14)
    calls = []

    def zero_then_failing_reader(n):
        calls.append(n)
        if len(calls) == 1:
            return b'\x00' * n
        raise OSError("entropy unavailable")

    try:
        group.generate_private_key(zero_then_failing_reader)
    except RandomSourceError as e:
        assert isinstance(e.__cause__, OSError)
    else:
        raise AssertionError("expected RandomSourceError")
    assert len(calls) == 2


def test_random_source_short_read():
    group = get_group(GroupID.ID14)
    try:
        group.generate_private_key(lambda n: b'\x01' * (n - 1))
    except RandomSourceError:
        pass
    else:
        raise AssertionError("expected RandomSourceError")


def test_generate_without_prime():
    group = create_group(None, 2)
    try:
        group.generate_private_key()
    except InvalidGroupError:
        pass
    else:
        raise AssertionError("expected InvalidGroupError")


def test_generate_without_generator():
    group = create_group(23, None)
    try:
        group.generate_private_key()
    except InvalidGroupError:
        pass
    else:
        raise AssertionError("expected InvalidGroupError")


if __name__ == "__main__":
    print("=" * 60)
    print("Key Exchange Tests")
    print("=" * 60)

    failed = 0
    for name, func in list(globals().items()):
        if name.startswith("test_") and callable(func):
            try:
                func()
                print(f"✓ {name}")
            except AssertionError as e:
                failed += 1
                print(f"✗ {name}: {e}")

    sys.exit(1 if failed else 0)
