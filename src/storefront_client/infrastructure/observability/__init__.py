from .logger_factory_service import configure_logging, get_logger
from .redaction_service import redact_mapping, redact_text
from .tracing_setup import configure_tracing, trace_operation

__all__ = [
    "configure_logging",
    "configure_tracing",
    "get_logger",
    "redact_mapping",
    "redact_text",
    "trace_operation",
]
