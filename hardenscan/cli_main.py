#!/usr/bin/env python3
"""
hardenscan CLI - Command Line Interface

This module provides the Click-based CLI entry point for hardenscan.
Command execution logic lives in the command classes of ``cli.commands``.

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

import sys
from dataclasses import dataclass
from typing import Any

import click
from rich.markup import escape

from .cli.commands import CheckCommand, CommandContext, VersionCommand
from .cli.display import error_console, print_usage
from .config import Config, ConfigError


@dataclass
class CLIArgs:
    paths: tuple[str, ...]
    output_json: bool
    list_functions: bool
    verbose: bool
    quiet: bool
    config: str | None
    version: bool


def main(**kwargs: Any):
    """
    hardenscan - report RELRO, stack canary, PIE, PIC and FORTIFY for ELF binaries.
    """
    args = CLIArgs(**kwargs)
    try:
        run_cli(args)
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Analysis interrupted by user[/yellow]")
        sys.exit(1)


@click.command()
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "-j",
    "--json",
    "output_json",
    is_flag=True,
    help="Output all reports as one JSON document",
)
@click.option(
    "-f",
    "--functions",
    "list_functions",
    is_flag=True,
    help="List fortified function names after each report",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--quiet", is_flag=True, help="Suppress all non-critical log output")
@click.option("--config", type=click.Path(dir_okay=False), help="Custom config file path")
@click.option("--version", is_flag=True, help="Show version information and exit")
def cli(**kwargs: Any):
    """Click-based CLI entry point."""
    main(**kwargs)


def run_cli(args: CLIArgs) -> None:
    """Primary CLI workflow separated for clarity and testability."""
    if args.version:
        sys.exit(VersionCommand().execute({}))

    if not args.paths:
        print_usage()
        sys.exit(1)

    config = _load_config(args.config)
    verbose = args.verbose or bool(config.get("general", "verbose", False))
    context = CommandContext.create(config=config, verbose=verbose, quiet=args.quiet)
    command = CheckCommand(context)
    exit_code = command.execute(
        {
            "paths": args.paths,
            "output_json": args.output_json,
            "list_functions": args.list_functions,
            "verbose": verbose,
        }
    )
    sys.exit(exit_code)


def _load_config(config_path: str | None) -> Config:
    try:
        return Config(config_path)
    except ConfigError as e:
        error_console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    cli()
