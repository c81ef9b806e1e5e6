#!/usr/bin/env python3
"""
hardenscan Utilities
"""

from .error_handler import (
    AnalysisError,
    AnalysisErrorKind,
    get_error_stats,
    record_error,
    reset_error_stats,
)
from .logger import get_logger, setup_logger

__all__ = [
    "AnalysisError",
    "AnalysisErrorKind",
    "get_error_stats",
    "get_logger",
    "record_error",
    "reset_error_stats",
    "setup_logger",
]
