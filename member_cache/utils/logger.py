"""
Package logger

Records logged while a transport request is in flight carry that
request's trace ID.
"""

import contextvars
import logging
import time
import uuid
from contextlib import contextmanager

_request_trace = contextvars.ContextVar("request_trace", default="")


def new_trace_id(prefix: str = "req") -> str:
    """prefix-timestamp-first 8 chars of a UUID"""
    return f"{prefix}-{int(time.time())}-{str(uuid.uuid4())[:8]}"


@contextmanager
def request_trace(prefix: str = "req"):
    """Bind a fresh trace ID to the current request; yields the ID"""
    trace_id = new_trace_id(prefix)
    token = _request_trace.set(trace_id)
    try:
        yield trace_id
    finally:
        _request_trace.reset(token)


def current_trace_id() -> str:
    return _request_trace.get()


class TraceLogFilter(logging.Filter):
    """Prefixes records with the active request trace ID"""

    def filter(self, record):
        trace_id = _request_trace.get()
        record.trace_id = trace_id
        if trace_id:
            record.msg = f"[{trace_id}] {record.msg}"
        return True


logger = logging.getLogger("member_cache")
logger.addFilter(TraceLogFilter())
logger.addHandler(logging.NullHandler())
