#!/usr/bin/env python3
"""
hardenscan - ELF binary hardening checker
Reports RELRO, stack canary, PIE, PIC and FORTIFY_SOURCE usage for
64-bit x86-64 ELF executables and shared objects.

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __url__, __version__

__description__ = "ELF binary hardening checker"

from .core.elf_view import ElfMetadataView, parse_elf
from .core.inspector import AnalysisOutcome, ElfInspector, analyze_bytes, analyze_file
from .domain.results import HardeningFlags, HardeningReport, Relro

__all__ = [
    "AnalysisOutcome",
    "ElfInspector",
    "ElfMetadataView",
    "HardeningFlags",
    "HardeningReport",
    "Relro",
    "analyze_bytes",
    "analyze_file",
    "parse_elf",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
]
