"""Run a Diffie-Hellman exchange between two local peers and show the result."""

import argparse
import json
import sys

from dhkx.common.config import get_group_id
from dhkx.common.protocol import DHPublicMessage
from dhkx.crypto.errors import DHError
from dhkx.crypto.registry import get_group


def run_exchange(group_id: int) -> bool:
    """Exchange public values between two peers over a JSON round trip.

    Args:
        group_id: Registry group ID (0 for default)

    Returns:
        True if both peers derived the same shared secret
    """
    group = get_group(group_id)
    print(f"✓ Using group {int(group.group_id)} ({group.prime.bit_length()}-bit prime, g={group.generator})")

    alice = group.generate_private_key()
    bob = group.generate_private_key()
    print("✓ Generated key pairs for both peers")

    # Each side sends its public value as JSON
    alice_msg = json.dumps(DHPublicMessage.from_key(alice).model_dump())
    bob_msg = json.dumps(DHPublicMessage.from_key(bob).model_dump())
    print(f"  Public value size: {len(alice.marshal_public_key())} bytes")

    bob_view_of_alice = DHPublicMessage(**json.loads(alice_msg)).to_key()
    alice_view_of_bob = DHPublicMessage(**json.loads(bob_msg)).to_key()

    alice_secret = group.compute_key(alice_view_of_bob, alice).marshal_public_key()
    bob_secret = group.compute_key(bob_view_of_alice, bob).marshal_public_key()

    if alice_secret != bob_secret:
        print("✗ Shared secrets differ!")
        return False

    print(f"✓ Shared secrets match ({len(alice_secret)} bytes)")
    print(f"  Prefix: {alice_secret[:8].hex()}...")
    return True


def main():
    parser = argparse.ArgumentParser(description="Local Diffie-Hellman exchange demo")
    parser.add_argument("--group", type=int, default=None,
                        help="Group ID (1, 2, 14, 15; 0 = default). Defaults to DH_GROUP_ID")

    args = parser.parse_args()
    group_id = args.group if args.group is not None else get_group_id()
    try:
        success = run_exchange(group_id)
    except DHError as e:
        print(f"✗ {e}")
        return 1
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
