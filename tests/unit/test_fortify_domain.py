#!/usr/bin/env python3
"""Tests for fortified function extraction."""

import pytest

from hardenscan.core.elf_view import (
    DynamicEntries,
    DynamicEntry,
    DynamicSymbolTable,
    ElfHeader,
    ElfMetadataView,
    ElfSection,
    OtherContent,
    StaticSymbolTable,
)
from hardenscan.modules.fortify_domain import (
    extract_fortified,
    is_fortified_name,
    iter_symbol_names,
    strip_symbol_version,
)

pytestmark = pytest.mark.unit


HEADER = ElfHeader(elf_class="ELFCLASS64", machine="EM_X86_64", elf_type="ET_DYN")


def view(*sections: ElfSection) -> ElfMetadataView:
    return ElfMetadataView(header=HEADER, sections=sections)


class TestNameHelpers:
    def test_strip_symbol_version(self):
        assert strip_symbol_version("foo_chk@@GLIBC_2.4") == "foo_chk"
        assert strip_symbol_version("foo_chk") == "foo_chk"
        assert strip_symbol_version("a@@b@@c") == "a"

    def test_single_at_is_not_a_separator(self):
        assert strip_symbol_version("foo_chk@GLIBC_2.4") == "foo_chk@GLIBC_2.4"

    def test_is_fortified_name(self):
        assert is_fortified_name("__printf_chk")
        assert is_fortified_name("__memcpy_chk")
        assert not is_fortified_name("__memcpy_chk___internal")
        assert not is_fortified_name("___chk")
        assert not is_fortified_name("__stack_chk_fail")
        assert not is_fortified_name("printf")


def test_dynamic_names_are_kept_unmodified():
    result = extract_fortified(view(ElfSection(".dynsym", DynamicSymbolTable(("__printf_chk@@GLIBC_2.3.4",)))))
    assert result.names == ()
    assert result.count == 0


def test_static_names_lose_their_version():
    result = extract_fortified(view(ElfSection(".symtab", StaticSymbolTable(("foo_chk@@GLIBC_2.4",)))))
    assert result.names == ("foo_chk",)
    assert result.count == 1


def test_triple_underscore_names_are_excluded():
    result = extract_fortified(
        view(ElfSection(".dynsym", DynamicSymbolTable(("__printf_chk", "__memcpy_chk___internal"))))
    )
    assert result.names == ("__printf_chk",)


def test_counts_are_not_deduplicated_across_tables():
    result = extract_fortified(
        view(
            ElfSection(".dynsym", DynamicSymbolTable(("__printf_chk",))),
            ElfSection(".symtab", StaticSymbolTable(("__printf_chk@@GLIBC_2.3.4", "main"))),
        )
    )
    assert result.names == ("__printf_chk", "__printf_chk")
    assert result.count == 2


def test_other_variants_contribute_nothing():
    result = extract_fortified(
        view(
            ElfSection(".dynamic", DynamicEntries((DynamicEntry("DT_FLAGS_1", 1),))),
            ElfSection(".comment", OtherContent("SHT_PROGBITS")),
        )
    )
    assert result.count == 0


def test_iter_symbol_names_preserves_section_order():
    names = list(
        iter_symbol_names(
            view(
                ElfSection(".symtab", StaticSymbolTable(("b@@V1",))),
                ElfSection(".dynsym", DynamicSymbolTable(("a@@V2",))),
            )
        )
    )
    assert names == ["b", "a@@V2"]
