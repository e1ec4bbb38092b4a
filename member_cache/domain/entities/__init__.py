"""
Domain entities

- ServerMember: live member-of-server object, merged in place
"""

from .server_member import ServerMember, identity_of

__all__ = [
    "ServerMember",
    "identity_of",
]
