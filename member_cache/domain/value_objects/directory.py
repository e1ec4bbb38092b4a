"""
Directory Value Objects - Servers, roles and users owned by the client context
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Role:
    """Server role"""
    name: str
    rank: Optional[int] = None  # smaller rank takes priority
    colour: Optional[str] = None
    hoist: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Role":
        return cls(
            name=data.get("name", ""),
            rank=data.get("rank"),
            colour=data.get("colour"),
            hoist=data.get("hoist", False),
        )


@dataclass
class Server:
    """
    Server as seen by the member cache.

    Only the role table is used here; `roles` keeps the insertion order
    of the API payload.
    """
    id: str
    name: str = ""
    owner: Optional[str] = None
    roles: dict[str, Role] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "Server":
        return cls(
            id=data["_id"],
            name=data.get("name", ""),
            owner=data.get("owner"),
            roles={
                role_id: Role.from_dict(role)
                for role_id, role in (data.get("roles") or {}).items()
            },
        )


@dataclass
class User:
    """User as seen by the member cache"""
    id: str
    username: str = ""
    display_name: Optional[str] = None
    avatar: Optional[dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(
            id=data["_id"],
            username=data.get("username", ""),
            display_name=data.get("display_name"),
            avatar=data.get("avatar"),
        )
