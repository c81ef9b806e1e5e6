#!/usr/bin/env python3
"""ELF security domain helpers."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.constants import DF_1_NOW, DF_1_PIE, DT_FLAGS_1, DT_TEXTREL, PT_GNU_RELRO, STACK_CHK_FAIL
from ..core.elf_view import DynamicEntries, DynamicSymbolTable, ProgramHeader


def has_relro_segment(program_headers: Iterable[ProgramHeader]) -> bool:
    return any(ph.p_type == PT_GNU_RELRO for ph in program_headers)


def has_flags_1_bit(dynamic: DynamicEntries, bit: int) -> bool:
    return any(entry.tag == DT_FLAGS_1 and entry.value & bit for entry in dynamic.entries)


def has_bind_now(dynamic: DynamicEntries) -> bool:
    return has_flags_1_bit(dynamic, DF_1_NOW)


def has_pie_flag(dynamic: DynamicEntries) -> bool:
    return has_flags_1_bit(dynamic, DF_1_PIE)


def has_text_relocations(dynamic: DynamicEntries) -> bool:
    return any(entry.tag == DT_TEXTREL for entry in dynamic.entries)


def has_stack_canary(symtab: DynamicSymbolTable) -> bool:
    return STACK_CHK_FAIL in symtab.symbols
