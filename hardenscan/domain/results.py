"""Typed result models for hardening analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Relro(Enum):
    """RELRO level, ordered from weakest to strongest."""

    NONE = "None"
    PARTIAL = "Partial"
    FULL = "Full"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HardeningFlags:
    """Hardening properties derived from segments, dynamic tags and symbols."""

    relro: Relro = Relro.NONE
    stack_canary: bool = False
    pie: bool = False
    pic: bool = True


@dataclass(frozen=True)
class FortifiedFunctions:
    """Fortified symbol names, one per qualifying symbol-table entry."""

    names: tuple[str, ...] = ()

    @property
    def count(self) -> int:
        return len(self.names)


@dataclass(frozen=True)
class HardeningReport:
    """Combined hardening result for one binary."""

    flags: HardeningFlags
    fortify_used: bool
    fortified_count: int
    fortified_names: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "relro": self.flags.relro.value,
            "stack_canary": self.flags.stack_canary,
            "pie": self.flags.pie,
            "pic": self.flags.pic,
            "fortify": self.fortify_used,
            "checked_functions": self.fortified_count,
            "fortified_names": list(self.fortified_names),
        }


def build_report(flags: HardeningFlags, fortified: FortifiedFunctions) -> HardeningReport:
    return HardeningReport(
        flags=flags,
        fortify_used=fortified.count > 0,
        fortified_count=fortified.count,
        fortified_names=fortified.names,
    )
