#!/usr/bin/env python3
"""
hardenscan File Validator - reads a candidate file into memory

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from pathlib import Path

from ..utils.error_handler import FileReadError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class FileValidator:
    """
    Validates and loads files before binary analysis.

    Attributes:
        file_path: Pathlib Path object for the file
        filename: String representation of the file path
        max_size: Largest accepted file size in bytes
    """

    def __init__(self, filename: str | Path, max_size: int | None = None):
        self.filename = str(filename)
        self.file_path = Path(filename)
        self.max_size = max_size

    def read(self) -> bytes:
        """
        Read the whole file.

        Returns:
            File contents

        Raises:
            FileReadError: If the file is missing, unreadable or too large
        """
        try:
            file_size = self.file_path.stat().st_size
            if self.max_size is not None and file_size > self.max_size:
                raise FileReadError(
                    f"File too large ({file_size / 1024 / 1024:.1f}MB): {self.filename}"
                )
            data = self.file_path.read_bytes()
        except OSError as e:
            logger.info(f"File access error: {self.filename} - {e}")
            raise FileReadError(f"Cannot read {self.filename}: {e.strerror or e}") from e

        logger.debug(f"Read {len(data)} bytes from {self.filename}")
        return data


__all__ = ["FileValidator"]
