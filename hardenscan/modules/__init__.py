#!/usr/bin/env python3
"""
hardenscan Analysis Modules
"""

from .elf_security import detect_hardening
from .fortify_domain import extract_fortified

__all__ = [
    "detect_hardening",
    "extract_fortified",
]
