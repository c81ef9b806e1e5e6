#!/usr/bin/env python3
"""
hardenscan CLI Commands Package

Command Pattern implementation for the hardenscan CLI.
"""

from .base import Command, CommandContext
from .check_command import CheckCommand
from .version_command import VersionCommand

__all__ = [
    "Command",
    "CommandContext",
    "CheckCommand",
    "VersionCommand",
]
