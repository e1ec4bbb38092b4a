# Value Objects
from .member_key import MemberCompositeKey, encode_member_key
from .directory import Role, Server, User

__all__ = [
    "MemberCompositeKey",
    "encode_member_key",
    "Role",
    "Server",
    "User",
]
