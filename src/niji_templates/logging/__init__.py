from niji_templates.logging.factory import DefaultLoggerFactory
from niji_templates.logging.helpers import (
    JsonLogFormatter,
    get_logger,
    is_trace_enabled,
    setup_base_logger,
    trace_render,
)

__all__ = [
    'DefaultLoggerFactory',
    'JsonLogFormatter',
    'get_logger',
    'is_trace_enabled',
    'setup_base_logger',
    'trace_render',
]
