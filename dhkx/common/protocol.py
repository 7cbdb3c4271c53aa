"""Pydantic model for a DH public value sent together with its group ID."""

from typing import Optional
from pydantic import BaseModel

from dhkx.common.utils import b64e, b64d
from dhkx.crypto.errors import InvalidGroupError
from dhkx.crypto.key import DHKey
from dhkx.crypto.registry import get_group


class DHPublicMessage(BaseModel):
    """Public value of one peer."""
    type: str = "dh_public"
    group: int  # Registry group ID agreed by both peers
    y: str  # Base64 of the fixed-width big-endian public value

    @classmethod
    def from_key(cls, key: DHKey, group_id: Optional[int] = None) -> "DHPublicMessage":
        """Wrap a key's public value for transmission.

        Args:
            key: Own key; must belong to a registry group
            group_id: Registry ID of the group (default: the key's own)

        Returns:
            DHPublicMessage

        Raises:
            InvalidGroupError if the key has no group, its group is not a
                registry group, or group_id names a different group
            UnknownGroupError if group_id is not registered
        """
        if key.group is None:
            raise InvalidGroupError("DH: key has no group")
        if group_id is None:
            if key.group.group_id is None:
                raise InvalidGroupError("DH: key's group is not a registry group")
            group_id = key.group.group_id
        elif get_group(group_id) != key.group:
            raise InvalidGroupError(f"DH: key does not belong to group {group_id}")
        return cls(group=int(group_id), y=b64e(key.marshal_public_key()))

    def to_key(self) -> DHKey:
        """Decode the peer public value and attach the registry group.

        Raises:
            UnknownGroupError if the group ID is not registered
            binascii.Error if y is not valid base64
        """
        group = get_group(self.group)
        y = int.from_bytes(b64d(self.y), byteorder='big')
        return DHKey(y=y, group=group)
