from .logger import TraceLogFilter, current_trace_id, logger, request_trace

__all__ = ["logger", "TraceLogFilter", "current_trace_id", "request_trace"]
