#!/usr/bin/env python3
"""
ELF hardening detection.

Every flag is an OR over all qualifying sections. The result does not
depend on section order.
"""

from __future__ import annotations

from ..core.elf_view import (
    DynamicEntries,
    DynamicSymbolTable,
    ElfMetadataView,
    OtherContent,
    StaticSymbolTable,
)
from ..domain.results import HardeningFlags, Relro
from ..utils.logger import get_logger
from .elf_security_domain import (
    has_bind_now,
    has_pie_flag,
    has_relro_segment,
    has_stack_canary,
    has_text_relocations,
)

logger = get_logger(__name__)


def detect_hardening(view: ElfMetadataView) -> HardeningFlags:
    bind_now = False
    pie = False
    text_relocations = False
    stack_canary = False

    for section in view.sections:
        content = section.content
        if isinstance(content, DynamicEntries):
            bind_now = bind_now or has_bind_now(content)
            pie = pie or has_pie_flag(content)
            text_relocations = text_relocations or has_text_relocations(content)
        elif isinstance(content, DynamicSymbolTable):
            stack_canary = stack_canary or has_stack_canary(content)
        elif isinstance(content, (StaticSymbolTable, OtherContent)):
            continue
        else:
            raise TypeError(f"Unknown section content: {type(content).__name__}")

    flags = HardeningFlags(
        relro=_relro_level(view, bind_now),
        stack_canary=stack_canary,
        pie=pie,
        pic=not text_relocations,
    )
    logger.debug(f"Hardening flags: {flags}")
    return flags


def _relro_level(view: ElfMetadataView, bind_now: bool) -> Relro:
    if bind_now:
        return Relro.FULL
    if has_relro_segment(view.program_headers):
        return Relro.PARTIAL
    return Relro.NONE
