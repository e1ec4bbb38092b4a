"""
Member Key Value Object - Composite identity of a server membership
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from ...shared.constants import KEY_FIELD_SERVER, KEY_FIELD_USER
from ..exceptions import InvalidMemberIdException


@dataclass(frozen=True)
class MemberCompositeKey:
    """Composite member identity (server ID + user ID)"""
    server: str
    user: str

    @classmethod
    def from_payload(cls, identity: Union["MemberCompositeKey", Mapping]) -> "MemberCompositeKey":
        """
        Build a key from a wire identity.

        Args:
            identity: `{"server": ..., "user": ...}` mapping or an existing key

        Returns:
            MemberCompositeKey

        Raises:
            InvalidMemberIdException: a component is missing
        """
        if isinstance(identity, cls):
            return identity
        if not isinstance(identity, Mapping):
            raise InvalidMemberIdException(identity)

        server = identity.get(KEY_FIELD_SERVER)
        user = identity.get(KEY_FIELD_USER)
        if server is None or user is None:
            raise InvalidMemberIdException(identity)
        return cls(server=server, user=user)

    def to_dict(self) -> dict:
        return {KEY_FIELD_SERVER: self.server, KEY_FIELD_USER: self.user}

    def encode(self) -> str:
        return encode_member_key(self)


def encode_member_key(identity: Union[MemberCompositeKey, Mapping[str, Any]]) -> str:
    """
    Encode a composite identity as a single string key.

    Fields are serialized in sorted order, so the way the identity was
    built never changes the key: `{"server":"S","user":"U"}`.
    """
    key = MemberCompositeKey.from_payload(identity)
    return json.dumps(key.to_dict(), sort_keys=True, separators=(",", ":"))
