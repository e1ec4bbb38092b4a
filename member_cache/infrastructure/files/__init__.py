from .file_url_resolver import FileUrlResolver

__all__ = ["FileUrlResolver"]
