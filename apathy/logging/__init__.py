"""Structured logging for apathy's command line and HTTP surfaces."""

from .structured import StructuredLogger, LogLevel, create_logger
from .redaction import DataRedactor

__all__ = [
    "StructuredLogger",
    "LogLevel",
    "create_logger",
    "DataRedactor",
]
