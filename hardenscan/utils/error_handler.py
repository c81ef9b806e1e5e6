#!/usr/bin/env python3
"""
Error taxonomy and error statistics for hardenscan

Every per-file failure is classified into one of four kinds. The inspector
raises the exceptions below internally and converts them into tagged
``AnalysisError`` values at the file boundary, so a failing file never
aborts a batch.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import threading
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .logger import get_logger

logger = get_logger(__name__)


class AnalysisErrorKind(Enum):
    """Per-file failure kinds"""

    IO_ERROR = "io_error"  # File could not be read
    MALFORMED_ELF = "malformed_elf"  # Structural parse rejection
    UNSUPPORTED_CLASS = "unsupported_class"  # Not a 64-bit ELF
    UNSUPPORTED_MACHINE = "unsupported_machine"  # Not x86-64


class HardenscanError(Exception):
    """Base class for per-file analysis failures"""

    kind: AnalysisErrorKind = AnalysisErrorKind.MALFORMED_ELF


class FileReadError(HardenscanError):
    kind = AnalysisErrorKind.IO_ERROR


class MalformedElfError(HardenscanError):
    kind = AnalysisErrorKind.MALFORMED_ELF


class UnsupportedClassError(HardenscanError):
    kind = AnalysisErrorKind.UNSUPPORTED_CLASS


class UnsupportedMachineError(HardenscanError):
    kind = AnalysisErrorKind.UNSUPPORTED_MACHINE


@dataclass(frozen=True)
class AnalysisError:
    """Tagged failure value for one file."""

    kind: AnalysisErrorKind
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message}


class ErrorClassifier:
    """Classify exceptions into analysis error kinds"""

    EXCEPTION_MAPPING = {
        FileNotFoundError: AnalysisErrorKind.IO_ERROR,
        PermissionError: AnalysisErrorKind.IO_ERROR,
        IsADirectoryError: AnalysisErrorKind.IO_ERROR,
        OSError: AnalysisErrorKind.IO_ERROR,
    }

    @classmethod
    def classify(cls, exception: BaseException) -> AnalysisErrorKind:
        """
        Map an exception to an error kind.

        Hardenscan errors carry their own kind. Known I/O exceptions map to
        ``IO_ERROR``; anything else raised while decoding a file is treated
        as a structural rejection.
        """
        if isinstance(exception, HardenscanError):
            return exception.kind

        for exc_type in type(exception).__mro__:
            if exc_type in cls.EXCEPTION_MAPPING:
                return cls.EXCEPTION_MAPPING[exc_type]

        return AnalysisErrorKind.MALFORMED_ELF

    @classmethod
    def to_error(cls, exception: BaseException) -> AnalysisError:
        """Build the tagged error value for an exception"""
        message = str(exception) or type(exception).__name__
        return AnalysisError(kind=cls.classify(exception), message=message)


class ErrorStats:
    """Thread-safe counters of per-file failures"""

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: dict[AnalysisErrorKind, int] = defaultdict(int)
        self._recent: list[AnalysisError] = []

    def record(self, error: AnalysisError) -> None:
        with self._lock:
            self._counts[error.kind] += 1
            self._recent.append(error)
            # Keep the tail only
            if len(self._recent) > 100:
                del self._recent[0]

    def reset(self) -> None:
        with self._lock:
            self._counts.clear()
            self._recent.clear()

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {
                "total_errors": sum(self._counts.values()),
                "errors_by_kind": {kind.value: count for kind, count in self._counts.items()},
                "recent_errors": [error.to_dict() for error in self._recent[-10:]],
            }


_error_stats = ErrorStats()


def record_error(error: AnalysisError, path: str | None = None) -> None:
    """Record a per-file failure in the global statistics"""
    _error_stats.record(error)
    logger.debug(f"Recorded {error.kind.value} for {path or '<bytes>'}: {error.message}")


def get_error_stats() -> dict[str, Any]:
    """Get error statistics for the current run"""
    return _error_stats.snapshot()


def reset_error_stats() -> None:
    """Reset error statistics"""
    _error_stats.reset()
