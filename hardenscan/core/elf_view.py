#!/usr/bin/env python3
"""
hardenscan ELF Metadata View - read-only projection of an ELF image

This module turns a raw byte buffer into an immutable ``ElfMetadataView``.
The structural decoding itself is delegated to pyelftools; the view keeps
only what the hardening checks need:

- the header class, machine and type
- the program header types, in table order
- the sections, in table order, each carrying one of four content variants:
  ``DynamicEntries``, ``DynamicSymbolTable``, ``StaticSymbolTable`` or
  ``OtherContent``

All names (tags, types, class, machine) use the canonical ELF spelling that
pyelftools produces, e.g. ``DT_FLAGS_1`` or ``PT_GNU_RELRO``.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any, Union

from elftools.common.exceptions import ELFError
from elftools.elf.elffile import ELFFile

from ..utils.error_handler import MalformedElfError
from ..utils.logger import get_logger
from .constants import SHT_DYNAMIC, SHT_DYNSYM, SHT_NOBITS, SHT_SYMTAB, SUPPORTED_CLASS

logger = get_logger(__name__)

# Errors pyelftools may surface while decoding a structure
_DECODE_ERRORS = (ELFError, ValueError, EOFError, UnicodeDecodeError)


@dataclass(frozen=True)
class ElfHeader:
    elf_class: str
    machine: str
    elf_type: str


@dataclass(frozen=True)
class ProgramHeader:
    p_type: str


@dataclass(frozen=True)
class DynamicEntry:
    tag: str
    value: int


@dataclass(frozen=True)
class DynamicEntries:
    """Tag/value pairs of a ``SHT_DYNAMIC`` section."""

    entries: tuple[DynamicEntry, ...] = ()


@dataclass(frozen=True)
class DynamicSymbolTable:
    """Symbol names of a ``SHT_DYNSYM`` section."""

    symbols: tuple[str, ...] = ()


@dataclass(frozen=True)
class StaticSymbolTable:
    """Symbol names of a ``SHT_SYMTAB`` section."""

    symbols: tuple[str, ...] = ()


@dataclass(frozen=True)
class OtherContent:
    section_type: str = ""


SectionContent = Union[DynamicEntries, DynamicSymbolTable, StaticSymbolTable, OtherContent]


@dataclass(frozen=True)
class ElfSection:
    name: str
    content: SectionContent


@dataclass(frozen=True)
class ElfMetadataView:
    """Immutable metadata of one ELF image."""

    header: ElfHeader
    program_headers: tuple[ProgramHeader, ...] = ()
    sections: tuple[ElfSection, ...] = ()

    @property
    def is_64bit(self) -> bool:
        return self.header.elf_class == SUPPORTED_CLASS


def parse_elf(data: bytes) -> ElfMetadataView:
    """
    Parse a byte buffer into an ElfMetadataView.

    Args:
        data: Complete contents of the file

    Returns:
        Read-only metadata view

    Raises:
        MalformedElfError: If the identification bytes are invalid, the
            buffer is truncated relative to the declared tables, or the
            header cannot be decoded
    """
    try:
        elffile = ELFFile(io.BytesIO(data))
        header = _read_header(elffile)
        _check_table_bounds(elffile, len(data))
        program_headers = tuple(
            ProgramHeader(p_type=_enum_name(segment["p_type"]))
            for segment in elffile.iter_segments()
        )
    except MalformedElfError:
        raise
    except _DECODE_ERRORS as e:
        raise MalformedElfError(f"Invalid ELF image: {e}") from e

    sections = tuple(_iter_view_sections(elffile, len(data)))
    logger.debug(
        f"Parsed {header.elf_class}/{header.machine}: "
        f"{len(program_headers)} program headers, {len(sections)} sections"
    )
    return ElfMetadataView(header=header, program_headers=program_headers, sections=sections)


def _read_header(elffile: ELFFile) -> ElfHeader:
    return ElfHeader(
        elf_class=_enum_name(elffile["e_ident"]["EI_CLASS"]),
        machine=_enum_name(elffile["e_machine"]),
        elf_type=_enum_name(elffile["e_type"]),
    )


def _check_table_bounds(elffile: ELFFile, size: int) -> None:
    """Reject buffers shorter than their declared header tables."""
    phnum = elffile.num_segments()
    if phnum:
        ph_end = elffile["e_phoff"] + phnum * elffile["e_phentsize"]
        if ph_end > size:
            raise MalformedElfError(
                f"Truncated ELF: program header table ends at {ph_end}, file is {size} bytes"
            )

    shnum = elffile.num_sections()
    if shnum:
        sh_end = elffile["e_shoff"] + shnum * elffile["e_shentsize"]
        if sh_end > size:
            raise MalformedElfError(
                f"Truncated ELF: section header table ends at {sh_end}, file is {size} bytes"
            )


def _iter_view_sections(elffile: ELFFile, size: int):
    for index in range(elffile.num_sections()):
        try:
            section = elffile.get_section(index)
        except _DECODE_ERRORS as e:
            logger.debug(f"Skipping unreadable section #{index}: {e}")
            yield ElfSection(name="", content=OtherContent())
            continue

        if not _section_in_bounds(section, size):
            logger.debug(
                f"Section {section.name!r} extends past the end of the file, ignoring its content"
            )
            content = OtherContent(section_type=_enum_name(section["sh_type"]))
            yield ElfSection(name=section.name, content=content)
            continue

        try:
            content = _section_content(section)
        except _DECODE_ERRORS as e:
            logger.debug(f"Could not decode section {section.name!r}: {e}")
            content = OtherContent(section_type=_enum_name(section["sh_type"]))

        yield ElfSection(name=section.name, content=content)


def _section_in_bounds(section: Any, size: int) -> bool:
    """Declared sizes are untrusted: the data must lie inside the buffer."""
    if _enum_name(section["sh_type"]) == SHT_NOBITS:
        return True
    return section["sh_offset"] + section["sh_size"] <= size


def _section_content(section: Any) -> SectionContent:
    sh_type = _enum_name(section["sh_type"])

    if sh_type == SHT_DYNAMIC:
        return DynamicEntries(
            entries=tuple(
                DynamicEntry(tag=_enum_name(tag.entry.d_tag), value=tag.entry.d_val)
                for tag in section.iter_tags()
            )
        )
    if sh_type == SHT_DYNSYM:
        return DynamicSymbolTable(symbols=_symbol_names(section))
    if sh_type == SHT_SYMTAB:
        return StaticSymbolTable(symbols=_symbol_names(section))

    return OtherContent(section_type=sh_type)


def _symbol_names(section: Any) -> tuple[str, ...]:
    # Tables with a zero entry size cannot be iterated
    if section["sh_entsize"] == 0:
        return ()

    names = []
    for index in range(section.num_symbols()):
        try:
            names.append(section.get_symbol(index).name)
        except _DECODE_ERRORS as e:
            logger.debug(f"Skipping symbol #{index} of {section.name!r}: {e}")
    return tuple(names)


def _enum_name(value: Any) -> str:
    """pyelftools yields names for known values and ints otherwise."""
    if isinstance(value, int):
        return f"0x{value:x}"
    return str(value)
