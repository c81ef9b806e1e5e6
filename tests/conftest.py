"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from elf_builder import ElfBuilder, hardened_binary
from hardenscan.utils.error_handler import reset_error_stats


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests over in-memory views")
    config.addinivalue_line("markers", "integration: tests over real ELF images and the CLI")


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep ~/.hardenscan/config.json of the developer out of the tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    return home


@pytest.fixture(autouse=True)
def clean_error_stats():
    reset_error_stats()
    yield
    reset_error_stats()
    hardenscan_logger = logging.getLogger("hardenscan")
    hardenscan_logger.setLevel(logging.WARNING)
    # Handlers bind the stderr of the run that created them
    hardenscan_logger.handlers.clear()


@pytest.fixture
def write_elf(tmp_path: Path) -> Callable[..., Path]:
    """Write a built image below tmp_path and return its path."""

    def _write(builder: ElfBuilder, name: str = "binary", directory: Path | None = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        return builder.write(target_dir / name)

    return _write


@pytest.fixture
def hardened_elf(write_elf: Callable[..., Path]) -> Path:
    return write_elf(hardened_binary(), "hardened")
