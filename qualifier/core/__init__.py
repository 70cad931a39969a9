"""
Core module - Configuration and cross-cutting concerns.

This module provides:
- config.py         : Environment-based configuration management
- logging_config.py : Centralized logging setup
- exceptions.py     : Error kinds and the exception hierarchy
- validators.py     : JSON value type checks and integer truncation
- audit.py          : Request audit middleware
"""
from qualifier.core.config import get_settings, load_settings, Settings
from qualifier.core.logging_config import setup_logging, get_logger
from qualifier.core.exceptions import (
    ErrorKind,
    QualifierException,
    InvalidRequest,
    AIUnavailable,
    InternalError,
)

__all__ = [
    "get_settings",
    "load_settings",
    "Settings",
    "setup_logging",
    "get_logger",
    "ErrorKind",
    "QualifierException",
    "InvalidRequest",
    "AIUnavailable",
    "InternalError",
]
