# Infrastructure Layer
from .config import ConfigManager
from .files import FileUrlResolver
from .transport import HttpTransport

__all__ = [
    # Config
    "ConfigManager",
    # Files
    "FileUrlResolver",
    # Transport
    "HttpTransport",
]
