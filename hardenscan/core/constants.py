#!/usr/bin/env python3
"""
hardenscan Core Constants - ELF identifiers and hardening bit flags

Names follow the canonical ELF vocabulary used by pyelftools, so values read
from the metadata view can be compared directly.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# =============================================================================
# Supported targets
# =============================================================================
SUPPORTED_CLASS = "ELFCLASS64"
SUPPORTED_MACHINE = "EM_X86_64"

# =============================================================================
# Program header types
# =============================================================================
PT_GNU_RELRO = "PT_GNU_RELRO"  # Segment made read-only after relocation

# =============================================================================
# Section types
# =============================================================================
SHT_DYNAMIC = "SHT_DYNAMIC"
SHT_DYNSYM = "SHT_DYNSYM"
SHT_NOBITS = "SHT_NOBITS"  # Occupies no file space
SHT_SYMTAB = "SHT_SYMTAB"

# =============================================================================
# Dynamic section tags and DT_FLAGS_1 bits
# =============================================================================
DT_FLAGS_1 = "DT_FLAGS_1"
DT_TEXTREL = "DT_TEXTREL"

DF_1_NOW = 0x00000001  # Bind all symbols at load time
DF_1_PIE = 0x08000000  # Object is a position-independent executable

# =============================================================================
# Symbol names
# =============================================================================
STACK_CHK_FAIL = "__stack_chk_fail"
FORTIFIED_SUFFIX = "_chk"
INTERNAL_SYMBOL_MARKER = "___"  # Aliases and internal symbols, not public API
SYMBOL_VERSION_SEPARATOR = "@@"

# =============================================================================
# File size limits
# =============================================================================
DEFAULT_MAX_FILE_SIZE_MB = 1024
