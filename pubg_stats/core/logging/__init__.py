"""Structured logging: levels, context, formatters and bootstrap."""
from .config import bootstrap_logging, shutdown_logging
from .context import RequestContextFilter, bind, get_context, log_context, record_context, unbind
from .formatter import ConsoleFormatter, JSONFormatter
from .logger import LogLevel, StructuredLogger, get_logger

__all__ = [
    'bootstrap_logging',
    'shutdown_logging',
    'bind',
    'unbind',
    'get_context',
    'log_context',
    'record_context',
    'RequestContextFilter',
    'ConsoleFormatter',
    'JSONFormatter',
    'LogLevel',
    'StructuredLogger',
    'get_logger',
]
