"""
File URL resolver
"""

from typing import Any, Optional
from urllib.parse import urlencode

from ...domain.repositories.directory_repository import IFileUrlResolver


class FileUrlResolver(IFileUrlResolver):
    """Maps attachment descriptors onto file server URLs."""

    def __init__(self, autumn_url: str):
        self.autumn_url = autumn_url.rstrip("/")

    def generate_file_url(
        self,
        attachment: Optional[dict[str, Any]],
        max_side: Optional[int] = None,
        size: Optional[int] = None,
        fallback: Optional[str] = None,
    ) -> Optional[str]:
        if not attachment:
            return fallback

        url = f"{self.autumn_url}/{attachment.get('tag', 'attachments')}/{attachment['_id']}"
        query = {}
        if max_side is not None:
            query["max_side"] = max_side
        if size is not None:
            query["size"] = size
        if query:
            url = f"{url}?{urlencode(query)}"
        return url
