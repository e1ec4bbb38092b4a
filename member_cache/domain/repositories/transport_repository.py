"""
Transport Repository Interface - Request/response access to the chat API
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IMemberTransport(ABC):
    """
    Transport interface

    Entity write operations go through `req` and hand its result back
    unchanged. Implementations define their own failure kinds; they are
    expected to raise subclasses of `TransportException`.
    """

    @abstractmethod
    async def req(
        self,
        method: str,
        path: str,
        data: Optional[dict] = None,
    ) -> Any:
        """
        Perform an API request

        Args:
            method: HTTP method ("GET", "PATCH", "DELETE", ...)
            path: Route path, e.g. "/servers/{server}/members/{user}"
            data: JSON body

        Returns:
            Decoded response body, or None for empty responses
        """
        pass

    async def close(self) -> None:
        """Release transport resources"""
        return None
