"""
Client context

Owns the user/server directories, the event bus, the transport and the
member store. It is passed explicitly to the store and to every member,
so independent contexts never share state.
"""

from typing import Any, Optional, Union

from ..domain.repositories.directory_repository import IDirectory, IFileUrlResolver
from ..domain.repositories.transport_repository import IMemberTransport
from ..domain.services.member_store import MemberStore
from ..domain.value_objects.directory import Server, User
from ..infrastructure.config.config_manager import ConfigManager
from ..infrastructure.files.file_url_resolver import FileUrlResolver
from ..infrastructure.transport.http_transport import HttpTransport
from .event_bus import EventBus


class ClientContext(IDirectory):
    """
    Client context

    Attributes:
        config (ConfigManager): Client configuration
        transport (IMemberTransport): API transport
        events (EventBus): Client event bus
        users (dict[str, User]): User directory
        servers (dict[str, Server]): Server directory
        members (MemberStore): Member cache bound to this context
    """

    def __init__(
        self,
        config: Union[ConfigManager, dict, None] = None,
        transport: Optional[IMemberTransport] = None,
        file_resolver: Optional[IFileUrlResolver] = None,
        events: Optional[EventBus] = None,
    ):
        if not isinstance(config, ConfigManager):
            config = ConfigManager(config)
        self.config = config
        self.transport = transport or HttpTransport(config)
        self.file_resolver = file_resolver or FileUrlResolver(config.get_autumn_url())
        self.events = events or EventBus()

        self.users: dict[str, User] = {}
        self.servers: dict[str, Server] = {}
        self.members = MemberStore(self)

    async def __aenter__(self) -> "ClientContext":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self.transport.close()

    # ==================== IDirectory ====================

    def resolve_user(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def resolve_server(self, server_id: str) -> Optional[Server]:
        return self.servers.get(server_id)

    # ==================== Directory maintenance ====================

    def add_user(self, user: Union[User, dict]) -> User:
        if isinstance(user, dict):
            user = User.from_dict(user)
        self.users[user.id] = user
        return user

    def add_server(self, server: Union[Server, dict]) -> Server:
        if isinstance(server, dict):
            server = Server.from_dict(server)
        self.servers[server.id] = server
        return server

    def remove_server(self, server_id: str) -> Optional[Server]:
        return self.servers.pop(server_id, None)

    # ==================== Files ====================

    def generate_file_url(self, attachment: Optional[dict[str, Any]], **options: Any) -> Optional[str]:
        return self.file_resolver.generate_file_url(attachment, **options)
