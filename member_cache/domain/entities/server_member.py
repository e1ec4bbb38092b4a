"""
Server Member Entity

One live object per member-of-server relationship. Instances are created
and registered only by `MemberStore.upsert`; later payloads are merged in
place so every holder of a reference sees the current state.

Derived views (`ordered_roles`, `hoisted_role`, `user`, `server`) are
recomputed from the current fields and the context directories on every
access, never cached.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from ...shared.constants import (
    CLEARABLE_FIELDS,
    FIELD_AVATAR,
    FIELD_NICKNAME,
    FIELD_ROLES,
    MEMBER_ID_ALIAS,
    MEMBER_ID_FIELD,
    MEMBER_ROUTE,
    MERGEABLE_FIELDS,
)
from ..exceptions import DanglingReferenceException, InvalidMemberIdException
from ..value_objects.directory import Role, Server, User
from ..value_objects.member_key import MemberCompositeKey

if TYPE_CHECKING:
    from ...application.client_context import ClientContext

# (member, field_name, old_value, new_value)
ChangeCallback = Callable[["ServerMember", str, Any, Any], None]


def identity_of(payload: Mapping) -> MemberCompositeKey:
    """Read the composite identity of a member payload."""
    identity = payload.get(MEMBER_ID_FIELD)
    if identity is None:
        identity = payload.get(MEMBER_ID_ALIAS)
    if identity is None:
        raise InvalidMemberIdException(payload)
    return MemberCompositeKey.from_payload(identity)


class ServerMember:
    """
    Server member entity

    Attributes:
        identity: Composite (server, user) key, never reassigned
        nickname: Server nickname, None when unset
        avatar: Server avatar attachment descriptor, None when unset
        roles: Held role IDs, None when unset
    """

    def __init__(
        self,
        context: ClientContext,
        data: Mapping,
        on_change: Optional[ChangeCallback] = None,
    ):
        self.context = context
        self._identity = identity_of(data)
        self._on_change = on_change

        # Payload containers are copied; callers keep ownership of theirs
        self.nickname: Optional[str] = data.get(FIELD_NICKNAME)
        self.avatar: Optional[dict[str, Any]] = copy.deepcopy(data.get(FIELD_AVATAR))
        self.roles: Optional[list[str]] = copy.deepcopy(data.get(FIELD_ROLES))

    def __repr__(self) -> str:
        return (
            f"<ServerMember server={self.identity.server!r} user={self.identity.user!r} "
            f"nickname={self.nickname!r} roles={self.roles!r}>"
        )

    @property
    def identity(self) -> MemberCompositeKey:
        return self._identity

    @property
    def route(self) -> str:
        return MEMBER_ROUTE.format(server=self.identity.server, user=self.identity.user)

    # ==================== Merge ====================

    def merge(
        self,
        data: Mapping,
        clear: Union[str, Iterable[str], None] = None,
    ) -> list[str]:
        """
        Merge a partial payload into this member.

        A field named by `clear` ("Nickname" / "Avatar") is unset and is not
        re-set from the same payload. Every other mergeable field is replaced
        only when the payload carries it and the value differs from the
        current one; missing keys leave the field alone, unknown keys are
        ignored.

        Change notifications go out after all fields are applied, so
        listeners never observe a half-merged member.

        Args:
            data: Partial member payload
            clear: A clearable field name, or several

        Returns:
            Names of the fields that changed
        """
        changes: list[tuple[str, Any, Any]] = []

        cleared = self._resolve_clear(clear)
        for field_name in cleared:
            old = getattr(self, field_name)
            setattr(self, field_name, None)
            if old is not None:
                changes.append((field_name, old, None))

        for field_name in MERGEABLE_FIELDS:
            if field_name in cleared or field_name not in data:
                continue
            old = getattr(self, field_name)
            new = data[field_name]
            if new != old:
                new = copy.deepcopy(new)
                setattr(self, field_name, new)
                changes.append((field_name, old, new))

        if self._on_change is not None:
            for field_name, old, new in changes:
                self._on_change(self, field_name, old, new)

        return [field_name for field_name, _, _ in changes]

    @staticmethod
    def _resolve_clear(clear: Union[str, Iterable[str], None]) -> list[str]:
        if clear is None:
            return []
        names = [clear] if isinstance(clear, str) else list(clear)
        return [CLEARABLE_FIELDS[name] for name in names if name in CLEARABLE_FIELDS]

    # ==================== Directory lookups ====================

    @property
    def user(self) -> Optional[User]:
        """Associated user, looked up on every access"""
        return self.context.resolve_user(self.identity.user)

    @property
    def server(self) -> Optional[Server]:
        """Associated server, looked up on every access"""
        return self.context.resolve_server(self.identity.server)

    # ==================== Derived views ====================

    @property
    def ordered_roles(self) -> list[tuple[str, Role]]:
        """
        Held roles as (role_id, role) pairs, highest rank value first.

        Follows the server's role table order for equal ranks; a role
        without a rank counts as 0.

        Raises:
            DanglingReferenceException: the server is not in the directory
        """
        server = self.server
        if server is None:
            raise DanglingReferenceException("server", self.identity.server)

        held = set(self.roles or ())
        return sorted(
            ((role_id, role) for role_id, role in server.roles.items() if role_id in held),
            key=lambda item: item[1].rank or 0,
            reverse=True,
        )

    @property
    def hoisted_role(self) -> Optional[tuple[str, Role]]:
        """
        Last entry of `ordered_roles`, or None.

        This is the held role with the smallest rank value.
        """
        roles = self.ordered_roles
        if roles:
            return roles[-1]
        return None

    def generate_avatar_url(
        self,
        max_side: Optional[int] = None,
        size: Optional[int] = None,
        fallback: Optional[str] = None,
    ) -> Optional[str]:
        """Server avatar URL, or `fallback` when no avatar is set."""
        return self.context.generate_file_url(
            self.avatar, max_side=max_side, size=size, fallback=fallback
        )

    # ==================== Remote operations ====================

    async def edit(self, data: Optional[dict] = None, **fields: Any) -> Any:
        """
        Edit this member on the server.

        Local state is left as is; the confirmed member comes back later
        as a regular update.

        Args:
            data: Member edit body (nickname, avatar, roles, remove)
            **fields: Extra body fields, merged over `data`

        Returns:
            Transport result, unchanged
        """
        body = dict(data or {})
        body.update(fields)
        return await self.context.transport.req("PATCH", self.route, body)

    async def kick(self) -> Any:
        """Kick this member from the server. Returns the transport result."""
        return await self.context.transport.req("DELETE", self.route)
