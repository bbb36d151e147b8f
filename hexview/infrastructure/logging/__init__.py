"""Structured logging for cell resolution."""

from .structured_logger import StructuredLogger, get_logger
from .decorators import log_operation
from .setup import setup_logging

__all__ = [
    'StructuredLogger',
    'get_logger',
    'log_operation',
    'setup_logging'
]
