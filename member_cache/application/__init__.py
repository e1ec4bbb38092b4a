# Application Layer - Context and event routing
from .client_context import ClientContext
from .event_bus import EventBus
from .member_event_handler import MemberEventHandler

__all__ = [
    "ClientContext",
    "EventBus",
    "MemberEventHandler",
]
