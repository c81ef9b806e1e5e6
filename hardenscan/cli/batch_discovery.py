#!/usr/bin/env python3
"""
hardenscan CLI Batch Discovery Module

Recursive enumeration of the regular files beneath a path argument.
Paths are yielded with the path argument as typed, so ``./bin/`` yields
``./bin/ls`` rather than a normalised form.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

from ..utils.logger import get_logger

logger = get_logger(__name__)


def _is_candidate(path: str, follow_symlinks: bool) -> bool:
    if os.path.islink(path) and not follow_symlinks:
        return False
    return os.path.isfile(path)


def iter_files(root: str | os.PathLike[str], follow_symlinks: bool = False) -> Iterator[str]:
    """
    Yield every regular file beneath ``root`` in sorted, depth-first order.

    A root that is itself a file is yielded as is. Missing roots and
    unreadable directories yield nothing. Symbolic links below the root are
    skipped unless ``follow_symlinks`` is set.
    """
    root = os.fspath(root)
    if os.path.isfile(root):
        yield root
        return
    if not os.path.isdir(root):
        logger.warning(f"Path does not exist or is not a directory: {root}")
        return

    def _on_error(error: OSError) -> None:
        logger.warning(f"Cannot list {error.filename}: {error.strerror}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error, followlinks=follow_symlinks):
        dirnames.sort()
        for name in sorted(filenames):
            candidate = os.path.join(dirpath, name)
            if _is_candidate(candidate, follow_symlinks):
                yield candidate


__all__ = ["iter_files"]
