#!/usr/bin/env python3
"""
hardenscan CLI Commands - Check Command

Hardening check over every file beneath the given paths.

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

from ...core.inspector import AnalysisOutcome, ElfInspector
from ...schemas.security import HardeningRunSchema
from ...utils.error_handler import get_error_stats, reset_error_stats
from ..batch_discovery import iter_files
from ..display import emit, print_checking, print_error_stats, print_outcome
from .base import Command


class CheckCommand(Command):
    """
    Command for checking the hardening of every file beneath a set of paths.

    Each file is analysed independently; a file that cannot be read or is
    not a 64-bit x86-64 ELF produces an error line and the walk continues.
    A run only fails for reasons unrelated to individual files.

    Responsibilities:
    - Discover regular files beneath each path argument
    - Run the inspector on each file
    - Print reports in text or JSON form
    - Summarise failures in verbose mode
    """

    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute the hardening check.

        Args:
            args: Dictionary containing:
                - paths: Path arguments, in command-line order
                - output_json: JSON output flag
                - list_functions: List fortified names after each report
                - verbose: Verbose output flag

        Returns:
            0 when every path was walked, 1 on an unexpected failure
        """
        paths: list[str] = list(args.get("paths", ()))
        output_json = args.get("output_json", False)
        verbose = args.get("verbose", False)
        config = self._get_config()
        list_functions = args.get("list_functions") or bool(
            config.get("output", "list_functions", False)
        )

        inspector = ElfInspector(max_file_size=config.max_file_size_bytes)
        reset_error_stats()

        try:
            outcomes: list[AnalysisOutcome] = []
            for path in paths:
                outcomes.extend(
                    self._check_path(
                        path,
                        inspector,
                        follow_symlinks=config.follow_symlinks,
                        echo=not output_json,
                        list_functions=list_functions,
                    )
                )

            if output_json:
                indent = config.get("output", "json_indent", 2)
                emit(HardeningRunSchema.from_outcomes(outcomes).model_dump_json(indent=indent))

            if verbose:
                print_error_stats(get_error_stats())

            return 0

        except KeyboardInterrupt:
            self.context.console.print("\n[yellow]Analysis interrupted by user[/yellow]")
            return 1

        except Exception as e:
            self._handle_error(e, verbose)
            return 1

    def _check_path(
        self,
        path: str,
        inspector: ElfInspector,
        follow_symlinks: bool,
        echo: bool,
        list_functions: bool,
    ) -> list[AnalysisOutcome]:
        """Analyse every file beneath one path argument."""
        if echo:
            print_checking(path)

        outcomes = []
        for file_path in iter_files(path, follow_symlinks=follow_symlinks):
            outcome = inspector.inspect(file_path)
            outcomes.append(outcome)
            if echo:
                print_outcome(outcome, list_functions=list_functions)

        if echo:
            emit()

        self.context.logger.info(
            f"Checked {len(outcomes)} files under {path}, "
            f"{sum(1 for outcome in outcomes if not outcome.ok)} failed"
        )
        return outcomes
