from flagfile.logging.factory import DefaultLoggerFactory
from flagfile.logging.helpers import (
    JsonLogFormatter,
    get_logger,
    is_trace_io_enabled,
    setup_base_logger,
    trace_io,
)

__all__ = [
    'DefaultLoggerFactory',
    'JsonLogFormatter',
    'get_logger',
    'is_trace_io_enabled',
    'setup_base_logger',
    'trace_io',
]
