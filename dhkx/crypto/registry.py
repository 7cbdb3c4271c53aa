"""Well-known MODP groups from RFC 2409 and RFC 3526."""

from enum import IntEnum

from dhkx.crypto.errors import UnknownGroupError
from dhkx.crypto.group import DHGroup


class GroupID(IntEnum):
    """Registry identifiers. DEFAULT (and anything below it) means group 14."""
    DEFAULT = 0
    ID1 = 1
    ID2 = 2
    ID14 = 14
    ID15 = 15


# RFC 2409 section 6.1, First Oakley Group (768-bit)
MODP_768_P = (
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74"
    "020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F1437"
    "4FE1356D6D51C245E485B576625E7EC6F44C42E9A63A3620FFFFFFFFFFFFFFFF"
)

# RFC 2409 section 6.2, Second Oakley Group (1024-bit)
MODP_1024_P = (
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74"
    "020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F1437"
    "4FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE65381FFFFFFFFFFFFFFFF"
)

# RFC 3526 section 3, 2048-bit MODP Group
MODP_2048_P = (
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74"
    "020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F1437"
    "4FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF05"
    "98DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB"
    "9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF695581718"
    "3995497CEA956AE515D2261898FA051015728E5A8AACAA68FFFFFFFFFFFFFFFF"
)

# RFC 3526 section 4, 3072-bit MODP Group
MODP_3072_P = (
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74"
    "020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F1437"
    "4FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF05"
    "98DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB"
    "9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF695581718"
    "3995497CEA956AE515D2261898FA051015728E5A8AAAC42DAD33170D04507A33"
    "A85521ABDF1CBA64ECFB850458DBEF0A8AEA71575D060C7DB3970F85A6E1E4C7"
    "ABF5AE8CDB0933D71E8C94E04A25619DCEE3D2261AD2EE6BF12FFA06D98A0864"
    "D87602733EC86A64521F2B18177B200CBBE117577A615D6C770988C0BAD946E2"
    "08E24FA074E5AB3143DB5BFCE0FD108E4B82D120A93AD2CAFFFFFFFFFFFFFFFF"
)

GENERATOR = 2

# Parsed once at import; DHGroup is immutable so the same instance is shared.
_GROUPS = {
    GroupID.ID1: DHGroup(int(MODP_768_P, 16), GENERATOR, GroupID.ID1),
    GroupID.ID2: DHGroup(int(MODP_1024_P, 16), GENERATOR, GroupID.ID2),
    GroupID.ID14: DHGroup(int(MODP_2048_P, 16), GENERATOR, GroupID.ID14),
    GroupID.ID15: DHGroup(int(MODP_3072_P, 16), GENERATOR, GroupID.ID15),
}


def get_group(group_id: int = GroupID.DEFAULT) -> DHGroup:
    """Fetch a DH group by its RFC 2409 / RFC 3526 ID.

    If unsure which group to use, pass 0 (GroupID.DEFAULT) for group 14.
    Any ID at or below 0 resolves to group 14 as well.

    Args:
        group_id: Group identifier

    Returns:
        The registered DHGroup

    Raises:
        UnknownGroupError if the ID is not registered
    """
    if group_id <= GroupID.DEFAULT:
        group_id = GroupID.ID14

    group = _GROUPS.get(group_id)
    if group is None:
        raise UnknownGroupError(f"DH: Unknown group {group_id}")
    return group


def supported_groups() -> list[GroupID]:
    """Concrete group IDs known to the registry, smallest first."""
    return sorted(_GROUPS)
