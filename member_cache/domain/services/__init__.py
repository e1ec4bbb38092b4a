"""
Domain services
"""

from .member_store import MemberStore

__all__ = [
    "MemberStore",
]
