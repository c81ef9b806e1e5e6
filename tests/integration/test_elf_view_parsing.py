#!/usr/bin/env python3
"""Tests for decoding real ELF images into metadata views."""

import pytest

from elf_builder import (
    DF_1_NOW,
    DF_1_PIE,
    DT_FLAGS_1,
    DT_TEXTREL,
    ELFCLASS32,
    EM_386,
    EM_AARCH64,
    PT_GNU_STACK,
    PT_LOAD,
    ElfBuilder,
    hardened_binary,
    patch_section_size,
)
from hardenscan import analyze_bytes
from hardenscan.core.elf_view import (
    DynamicEntries,
    DynamicEntry,
    DynamicSymbolTable,
    ElfHeader,
    ElfSection,
    OtherContent,
    ProgramHeader,
    StaticSymbolTable,
    parse_elf,
)
from hardenscan.domain.results import Relro
from hardenscan.utils.error_handler import MalformedElfError

pytestmark = pytest.mark.integration


def test_header_and_program_headers():
    view = parse_elf(hardened_binary().build())

    assert view.header == ElfHeader(elf_class="ELFCLASS64", machine="EM_X86_64", elf_type="ET_DYN")
    assert view.is_64bit
    assert view.program_headers == (ProgramHeader("PT_LOAD"), ProgramHeader("PT_GNU_RELRO"))


def test_sections_keep_table_order_and_variants():
    view = parse_elf(hardened_binary().build())

    names = [section.name for section in view.sections]
    assert names == ["", ".dynamic", ".dynsym", ".dynstr", ".dynstr", ".shstrtab"]

    dynamic = view.sections[1].content
    assert isinstance(dynamic, DynamicEntries)
    assert dynamic.entries[:2] == (
        DynamicEntry("DT_BIND_NOW", 0),
        DynamicEntry("DT_FLAGS_1", DF_1_NOW | DF_1_PIE),
    )

    dynsym = view.sections[2].content
    assert isinstance(dynsym, DynamicSymbolTable)
    assert dynsym.symbols[1:] == ("__stack_chk_fail", "__printf_chk", "__memcpy_chk", "puts")

    assert view.sections[3].content == OtherContent("SHT_STRTAB")


def test_static_symbol_names_are_raw_in_the_view():
    view = parse_elf(ElfBuilder().add_symtab(["foo_chk@@GLIBC_2.4", "main"]).build())

    symtab = view.sections[1].content
    assert isinstance(symtab, StaticSymbolTable)
    assert symtab.symbols[1:] == ("foo_chk@@GLIBC_2.4", "main")


def test_progbits_and_multiple_dynamic_sections():
    image = (
        ElfBuilder()
        .add_segment(PT_LOAD)
        .add_segment(PT_GNU_STACK)
        .add_progbits(b"\x90" * 16)
        .add_dynamic([(DT_TEXTREL, 0)])
        .add_dynamic([(DT_FLAGS_1, DF_1_PIE)], name=".dynamic2")
        .build()
    )
    view = parse_elf(image)

    assert [ph.p_type for ph in view.program_headers] == ["PT_LOAD", "PT_GNU_STACK"]
    assert view.sections[1].content == OtherContent("SHT_PROGBITS")
    assert view.sections[2].content.entries[0] == DynamicEntry("DT_TEXTREL", 0)
    assert view.sections[3].name == ".dynamic2"


def test_other_classes_and_machines_still_parse():
    view = parse_elf(ElfBuilder(elf_class=ELFCLASS32, machine=EM_386).add_dynsym(["puts"]).build())
    assert view.header.elf_class == "ELFCLASS32"
    assert view.header.machine == "EM_386"
    assert not view.is_64bit

    assert parse_elf(ElfBuilder(machine=EM_AARCH64).build()).header.machine == "EM_AARCH64"


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"\x7fEL",
        b"MZ\x90\x00" + b"\x00" * 60,
        b"not an elf file at all, just some text\n" * 4,
    ],
    ids=["empty", "short-magic", "pe-header", "text"],
)
def test_non_elf_buffers_are_rejected(data):
    with pytest.raises(MalformedElfError):
        parse_elf(data)


def test_truncated_image_is_rejected():
    image = hardened_binary().build()
    with pytest.raises(MalformedElfError):
        parse_elf(image[:100])


def test_missing_section_header_table_is_rejected():
    image = hardened_binary().build()
    with pytest.raises(MalformedElfError):
        parse_elf(image[:-8])


@pytest.mark.parametrize("declared_entries", [1_000, 2**40], ids=["past-eof", "huge"])
def test_symbol_table_larger_than_file_is_ignored(declared_entries):
    image = patch_section_size(hardened_binary().build(), 2, declared_entries * 24)

    view = parse_elf(image)
    assert view.sections[2] == ElfSection(".dynsym", OtherContent("SHT_DYNSYM"))
    assert isinstance(view.sections[1].content, DynamicEntries)

    outcome = analyze_bytes(image)
    assert outcome.ok
    assert outcome.report.flags.relro is Relro.FULL
    assert outcome.report.flags.stack_canary is False
    assert outcome.report.fortified_count == 0
