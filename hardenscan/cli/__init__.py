#!/usr/bin/env python3
"""
hardenscan CLI package
"""

from .batch_discovery import iter_files
from .display import format_report, print_outcome, print_usage

__all__ = ["format_report", "iter_files", "print_outcome", "print_usage"]
