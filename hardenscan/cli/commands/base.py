#!/usr/bin/env python3
"""
hardenscan CLI Commands - Base Abstractions

Command Pattern implementation for hardenscan CLI commands.

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

import logging
import traceback
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.markup import escape

from ...config import Config
from ...utils.logger import configure_logging_levels, setup_logger


@dataclass
class CommandContext:
    """
    State shared by the hardenscan commands of one invocation.

    Reports are written to stdout by ``cli.display``; ``console`` is the
    stderr console used for run-level diagnostics only.
    """

    console: Console
    logger: logging.Logger
    config: Config | None = None
    verbose: bool = False
    quiet: bool = False

    @classmethod
    def create(cls, config: Config | None = None, verbose: bool = False, quiet: bool = False) -> "CommandContext":
        """Build a context and apply the verbosity to the hardenscan loggers."""
        logger = setup_logger()
        configure_logging_levels(verbose, quiet)
        return cls(
            console=Console(stderr=True),
            logger=logger,
            config=config if config is not None else Config(),
            verbose=verbose,
            quiet=quiet,
        )


class Command(ABC):
    """A CLI operation. ``execute`` returns the process exit code."""

    def __init__(self, context: CommandContext | None = None):
        self._context = context

    @abstractmethod
    def execute(self, args: dict[str, Any]) -> int:
        """Run the command with the options parsed by click."""

    @property
    def context(self) -> CommandContext:
        if self._context is None:
            self._context = CommandContext.create()
        return self._context

    @context.setter
    def context(self, value: CommandContext) -> None:
        self._context = value

    def _get_config(self) -> Config:
        if self.context.config is None:
            self.context.config = Config()
        return self.context.config

    def _handle_error(self, error: Exception, verbose: bool) -> None:
        """Report a run-level failure. Per-file failures never reach here."""
        self.context.logger.error(f"Hardening check aborted: {error}")
        self.context.console.print(f"[red]Hardening check aborted: {escape(str(error))}[/red]")

        if verbose:
            self.context.console.print(traceback.format_exc(), style="dim", markup=False)
        else:
            self.context.console.print("[dim]Run again with --verbose for the traceback[/dim]")
