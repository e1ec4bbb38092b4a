# Repository Interfaces
from .transport_repository import IMemberTransport
from .directory_repository import IDirectory, IFileUrlResolver

__all__ = [
    "IMemberTransport",
    "IDirectory",
    "IFileUrlResolver",
]
