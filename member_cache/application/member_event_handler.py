"""
Member event handler

Routes member-related push events into the context's member store and
publishes the matching client events.
"""

from collections.abc import Mapping
from typing import Any

from ..shared.constants import (
    EVENT_MEMBER_LEAVE,
    EVENT_MEMBER_UPDATE,
    KEY_FIELD_SERVER,
    KEY_FIELD_USER,
    MEMBER_ID_FIELD,
    PUSH_SERVER_DELETE,
    PUSH_SERVER_MEMBER_JOIN,
    PUSH_SERVER_MEMBER_LEAVE,
    PUSH_SERVER_MEMBER_UPDATE,
)
from ..utils.logger import logger
from .client_context import ClientContext


class MemberEventHandler:
    """Member push event handler"""

    def __init__(self, context: ClientContext):
        self.context = context
        self._routes = {
            PUSH_SERVER_MEMBER_JOIN: self._on_member_join,
            PUSH_SERVER_MEMBER_UPDATE: self._on_member_update,
            PUSH_SERVER_MEMBER_LEAVE: self._on_member_leave,
            PUSH_SERVER_DELETE: self._on_server_delete,
        }

    def handle(self, event: Mapping[str, Any]) -> bool:
        """
        Apply one push event.

        Returns:
            False when the event type is not member-related
        """
        route = self._routes.get(event.get("type", ""))
        if route is None:
            logger.debug(f"Ignoring push event {event.get('type')!r}")
            return False
        route(event)
        return True

    def _on_member_join(self, event: Mapping[str, Any]) -> None:
        # Newer servers send the full member along with the IDs
        payload = dict(event.get("member") or {})
        payload[MEMBER_ID_FIELD] = {
            KEY_FIELD_SERVER: event["id"],
            KEY_FIELD_USER: event["user"],
        }
        self.context.members.upsert(
            payload, emit=self.context.config.get_emit_join_events()
        )

    def _on_member_update(self, event: Mapping[str, Any]) -> None:
        member = self.context.members.apply_update(
            event["id"], event.get("data") or {}, event.get("clear")
        )
        if member is not None:
            self.context.events.emit(EVENT_MEMBER_UPDATE, member)

    def _on_member_leave(self, event: Mapping[str, Any]) -> None:
        identity = {KEY_FIELD_SERVER: event["id"], KEY_FIELD_USER: event["user"]}
        member = self.context.members.get(identity)
        if self.context.members.delete(identity):
            self.context.events.emit(EVENT_MEMBER_LEAVE, member)

    def _on_server_delete(self, event: Mapping[str, Any]) -> None:
        server_id = event["id"]
        removed = self.context.members.delete_members_of(server_id)
        self.context.remove_server(server_id)
        logger.info(f"Server {server_id} deleted, dropped {removed} cached members")
