"""
Member Store Domain Service

Identity-keyed cache of live `ServerMember` objects.

Core guarantees:
- upsert is the only path that creates a member or writes the index
- one instance per (server, user) for the lifetime of the store
- later payloads are merged into the existing instance
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, Optional, Union

from ...shared.constants import EVENT_MEMBER_JOIN
from ...utils.logger import logger
from ..exceptions import InvalidMemberIdException
from ..entities.server_member import ServerMember, identity_of
from ..value_objects.member_key import MemberCompositeKey

if TYPE_CHECKING:
    from ...application.client_context import ClientContext

MemberIdentity = Union[MemberCompositeKey, Mapping]
ChangeListener = Callable[[ServerMember, str, Any, Any], None]


class MemberStore:
    """
    Member store

    Indexed by `MemberCompositeKey`, which hashes structurally; the encoded
    string form of a key is exposed through `keys()` and used in logs.
    """

    def __init__(self, context: ClientContext):
        self.context = context
        self._members: dict[MemberCompositeKey, ServerMember] = {}
        self._listeners: list[ChangeListener] = []

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[ServerMember]:
        return iter(list(self._members.values()))

    def __contains__(self, identity: object) -> bool:
        try:
            return self.has(identity)
        except InvalidMemberIdException:
            return False

    # ==================== Lookup ====================

    def has(self, identity: MemberIdentity) -> bool:
        return MemberCompositeKey.from_payload(identity) in self._members

    def get(self, identity: MemberIdentity) -> Optional[ServerMember]:
        return self._members.get(MemberCompositeKey.from_payload(identity))

    def keys(self) -> list[str]:
        """Encoded keys of all cached members"""
        return [key.encode() for key in self._members]

    def members_of(self, server_id: str) -> list[ServerMember]:
        """All cached members of a server"""
        return [
            member
            for key, member in self._members.items()
            if key.server == server_id
        ]

    # ==================== Upsert ====================

    def upsert(self, data: Mapping, emit: Any = False) -> ServerMember:
        """
        Insert a member or merge the payload into the cached one.

        Args:
            data: Member payload carrying `_id`
            emit: Only `True` publishes "member/join" for a new member

        Returns:
            The cached member instance
        """
        key = identity_of(data)

        member = self._members.get(key)
        if member is not None:
            changed = member.merge(data)
            if changed:
                logger.debug(f"Member {key.encode()} updated: {', '.join(changed)}")
            return member

        member = ServerMember(self.context, data, on_change=self._notify)
        self._members[key] = member
        logger.debug(f"Member {key.encode()} cached")

        if emit is True:
            self.context.events.emit(EVENT_MEMBER_JOIN, member)
        return member

    def apply_update(
        self,
        identity: MemberIdentity,
        data: Mapping,
        clear: Union[str, Iterable[str], None] = None,
    ) -> Optional[ServerMember]:
        """
        Merge a push update into a cached member.

        Unknown members are not created; the update is dropped.

        Returns:
            The updated member, or None when it is not cached
        """
        member = self.get(identity)
        if member is None:
            return None

        changed = member.merge(data, clear)
        if changed:
            logger.debug(f"Member {member.identity.encode()} updated: {', '.join(changed)}")
        return member

    # ==================== Removal ====================

    def delete(self, identity: MemberIdentity) -> bool:
        """Remove a member. Returns whether it was cached."""
        key = MemberCompositeKey.from_payload(identity)
        if self._members.pop(key, None) is None:
            return False
        logger.debug(f"Member {key.encode()} removed")
        return True

    def delete_members_of(self, server_id: str) -> int:
        """Remove every member of a server. Returns the number removed."""
        keys = [key for key in self._members if key.server == server_id]
        for key in keys:
            del self._members[key]
        if keys:
            logger.debug(f"Removed {len(keys)} members of server {server_id}")
        return len(keys)

    # ==================== Change notifications ====================

    def subscribe(self, listener: ChangeListener) -> None:
        """Register a (member, field, old, new) change listener"""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, member: ServerMember, field_name: str, old: Any, new: Any) -> None:
        for listener in list(self._listeners):
            try:
                listener(member, field_name, old, new)
            except Exception:
                logger.error(
                    f"Member change listener {listener!r} failed for {member.identity.encode()}",
                    exc_info=True,
                )
