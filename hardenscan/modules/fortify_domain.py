#!/usr/bin/env python3
"""Fortified (``_chk``) function extraction."""

from __future__ import annotations

from collections.abc import Iterator

from ..core.constants import FORTIFIED_SUFFIX, INTERNAL_SYMBOL_MARKER, SYMBOL_VERSION_SEPARATOR
from ..core.elf_view import (
    DynamicEntries,
    DynamicSymbolTable,
    ElfMetadataView,
    OtherContent,
    StaticSymbolTable,
)
from ..domain.results import FortifiedFunctions


def strip_symbol_version(name: str) -> str:
    """Drop a default-version suffix, e.g. ``foo_chk@@GLIBC_2.4`` -> ``foo_chk``."""
    return name.split(SYMBOL_VERSION_SEPARATOR, 1)[0]


def is_fortified_name(name: str) -> bool:
    return name.endswith(FORTIFIED_SUFFIX) and INTERNAL_SYMBOL_MARKER not in name


def iter_symbol_names(view: ElfMetadataView) -> Iterator[str]:
    """Yield dynamic names as-is and static names without their version."""
    for section in view.sections:
        content = section.content
        if isinstance(content, DynamicSymbolTable):
            yield from content.symbols
        elif isinstance(content, StaticSymbolTable):
            yield from (strip_symbol_version(name) for name in content.symbols)
        elif isinstance(content, (DynamicEntries, OtherContent)):
            continue
        else:
            raise TypeError(f"Unknown section content: {type(content).__name__}")


def extract_fortified(view: ElfMetadataView) -> FortifiedFunctions:
    # Not deduplicated: a name in both .dynsym and .symtab counts twice
    return FortifiedFunctions(
        names=tuple(name for name in iter_symbol_names(view) if is_fortified_name(name))
    )
