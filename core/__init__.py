# File Manager - Core Module
"""
Core infrastructure for the File Manager.
Configuration, logging, and error types shared by the file service and CLI.
"""

from .config import Config
from .errors import (
    FileManagerError,
    FileNotFound,
    InvalidOperation,
    Operation,
    OperationError,
    PathNotFound,
)
from .logger import StructuredLogger, LogEntry, LogLevel

__all__ = [
    "Config",
    "FileManagerError",
    "FileNotFound",
    "InvalidOperation",
    "Operation",
    "OperationError",
    "PathNotFound",
    "StructuredLogger",
    "LogEntry",
    "LogLevel",
]

__version__ = "0.1.0"
