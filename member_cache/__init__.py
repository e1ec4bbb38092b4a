"""
Server member cache

Identity-keyed cache of live server member objects for a chat client.
"""

from .application import ClientContext, EventBus, MemberEventHandler
from .domain.entities import ServerMember
from .domain.exceptions import (
    DanglingReferenceException,
    DomainException,
    InvalidMemberIdException,
    TransportAPIException,
    TransportConnectionException,
    TransportException,
)
from .domain.services import MemberStore
from .domain.value_objects import MemberCompositeKey, Role, Server, User, encode_member_key
from .infrastructure import ConfigManager, FileUrlResolver, HttpTransport
from .shared.constants import PACKAGE_VERSION

__version__ = PACKAGE_VERSION

__all__ = [
    "ClientContext",
    "EventBus",
    "MemberEventHandler",
    "ServerMember",
    "MemberStore",
    "MemberCompositeKey",
    "encode_member_key",
    "Role",
    "Server",
    "User",
    "ConfigManager",
    "FileUrlResolver",
    "HttpTransport",
    "DomainException",
    "DanglingReferenceException",
    "InvalidMemberIdException",
    "TransportException",
    "TransportAPIException",
    "TransportConnectionException",
]
