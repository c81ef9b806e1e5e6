#!/usr/bin/env python3
"""
hardenscan CLI Display Module

Plain-text report output. The report labels and their order are fixed so
that other tools can parse the output line by line.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from typing import Any

from rich.console import Console
from rich.table import Table

from ..core.inspector import AnalysisOutcome
from ..domain.results import HardeningReport

console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)

PROG_NAME = "hardenscan"


def _bool(value: bool) -> str:
    return "true" if value else "false"


def format_report(report: HardeningReport, list_functions: bool = False) -> list[str]:
    """Render a report as its text lines"""
    lines = [
        f"RELRO: {report.flags.relro.value}",
        f"STACK_CANARY: {_bool(report.flags.stack_canary)}",
        f"PIE: {_bool(report.flags.pie)}",
        f"PIC: {_bool(report.flags.pic)}",
        f"FORTIFY: {_bool(report.fortify_used)}",
        f"CHECKED FUNCTIONS: {report.fortified_count}",
    ]
    if list_functions:
        lines.extend(f"  {name}" for name in report.fortified_names)
    return lines


def emit(line: str = "") -> None:
    console.print(line, markup=False, emoji=False, soft_wrap=True)


def print_usage() -> None:
    emit(f"usage: {PROG_NAME} <binary_path>")


def print_checking(path: str) -> None:
    emit(f"Checking {path}")


def print_outcome(outcome: AnalysisOutcome, list_functions: bool = False) -> None:
    """Print a blank line, the file path, then its report or error"""
    emit()
    emit(outcome.path)
    if outcome.report is not None:
        for line in format_report(outcome.report, list_functions):
            emit(line)
    elif outcome.error is not None:
        emit(f"ERROR: {outcome.error.message}")


def print_error_stats(stats: dict[str, Any]) -> None:
    """Print per-kind failure counts on stderr"""
    if not stats.get("total_errors"):
        error_console.print("[green]No files failed analysis[/green]")
        return

    table = Table(title="Failed files by kind", show_header=True)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Count", style="red", justify="right")
    for kind, count in sorted(stats["errors_by_kind"].items()):
        table.add_row(kind, str(count))
    error_console.print(table)
