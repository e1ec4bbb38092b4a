"""
Directory Repository Interfaces - Lookups owned by the client context
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..value_objects.directory import Server, User


class IDirectory(ABC):
    """
    Directory interface

    Lookups return None for unknown IDs instead of raising.
    """

    @abstractmethod
    def resolve_user(self, user_id: str) -> Optional[User]:
        """Get a user by ID"""
        pass

    @abstractmethod
    def resolve_server(self, server_id: str) -> Optional[Server]:
        """Get a server by ID"""
        pass


class IFileUrlResolver(ABC):
    """
    File URL resolver interface

    Attachments are opaque descriptors (`{"_id": ..., "tag": ...}`); only
    the resolver knows how they map onto the file server.
    """

    @abstractmethod
    def generate_file_url(
        self,
        attachment: Optional[dict[str, Any]],
        max_side: Optional[int] = None,
        size: Optional[int] = None,
        fallback: Optional[str] = None,
    ) -> Optional[str]:
        """
        Build the URL of an attachment

        Args:
            attachment: Attachment descriptor, or None
            max_side: Maximum side length of a resized image
            size: Exact size of a resized image
            fallback: Returned when there is no attachment

        Returns:
            File URL, or `fallback`
        """
        pass
