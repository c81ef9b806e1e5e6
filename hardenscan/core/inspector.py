#!/usr/bin/env python3
"""
Per-file inspector.

Drives one file through ``Loaded -> Parsed -> Classified -> Reported``. Any
gate may instead end in ``Failed(kind)``; failures are returned as tagged
outcomes and never escape ``inspect``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..domain.results import HardeningReport, build_report
from ..modules.elf_security import detect_hardening
from ..modules.fortify_domain import extract_fortified
from ..utils.error_handler import (
    AnalysisError,
    ErrorClassifier,
    HardenscanError,
    UnsupportedClassError,
    UnsupportedMachineError,
    record_error,
)
from ..utils.logger import get_logger
from .constants import SUPPORTED_MACHINE
from .elf_view import ElfMetadataView, parse_elf
from .file_validator import FileValidator

logger = get_logger(__name__)


class AnalysisStage(Enum):
    LOADED = "loaded"
    PARSED = "parsed"
    CLASSIFIED = "classified"
    REPORTED = "reported"
    FAILED = "failed"


@dataclass(frozen=True)
class AnalysisOutcome:
    """Result of analysing one file: a report or an error, never both."""

    path: str
    report: HardeningReport | None = None
    error: AnalysisError | None = None
    execution_time: float = 0.0

    @property
    def ok(self) -> bool:
        return self.report is not None


def classify(view: ElfMetadataView) -> ElfMetadataView:
    """Gate a parsed view on the supported class and machine."""
    if not view.is_64bit:
        raise UnsupportedClassError(
            f"Unsupported ELF class {view.header.elf_class}: only 64-bit binaries are supported"
        )
    if view.header.machine != SUPPORTED_MACHINE:
        raise UnsupportedMachineError(
            f"Unsupported machine {view.header.machine}: only x86-64 binaries are supported"
        )
    return view


def analyze_view(view: ElfMetadataView) -> HardeningReport:
    """Build the report for a classified view. Never fails."""
    return build_report(detect_hardening(view), extract_fortified(view))


class ElfInspector:
    """Analyse files or buffers into AnalysisOutcome values."""

    def __init__(self, max_file_size: int | None = None):
        self.max_file_size = max_file_size

    def inspect(self, path: str | Path) -> AnalysisOutcome:
        start = time.perf_counter()
        filename = str(path)
        try:
            data = FileValidator(filename, max_size=self.max_file_size).read()
        except HardenscanError as e:
            return self._failed(filename, e, start)
        return self._run(filename, data, start)

    def inspect_bytes(self, data: bytes, name: str = "<bytes>") -> AnalysisOutcome:
        return self._run(name, data, time.perf_counter())

    def _run(self, filename: str, data: bytes, start: float) -> AnalysisOutcome:
        stage = AnalysisStage.LOADED
        try:
            view = parse_elf(data)
            stage = AnalysisStage.PARSED
            classify(view)
            stage = AnalysisStage.CLASSIFIED
        except HardenscanError as e:
            logger.debug(f"{filename}: failed after stage {stage.value}")
            return self._failed(filename, e, start)
        except Exception as e:
            # pyelftools can raise arbitrary errors on hostile input
            logger.debug(f"{filename}: parser error after stage {stage.value}: {e!r}")
            return self._failed(filename, e, start)

        report = analyze_view(view)
        logger.info(f"{filename}: {AnalysisStage.REPORTED.value}")
        return AnalysisOutcome(
            path=filename, report=report, execution_time=time.perf_counter() - start
        )

    def _failed(self, filename: str, exc: Exception, start: float) -> AnalysisOutcome:
        error = ErrorClassifier.to_error(exc)
        record_error(error, filename)
        logger.info(f"{filename}: {AnalysisStage.FAILED.value} ({error.kind.value})")
        return AnalysisOutcome(
            path=filename, error=error, execution_time=time.perf_counter() - start
        )


def analyze_file(path: str | Path, max_file_size: int | None = None) -> AnalysisOutcome:
    return ElfInspector(max_file_size=max_file_size).inspect(path)


def analyze_bytes(data: bytes) -> AnalysisOutcome:
    return ElfInspector().inspect_bytes(data)
