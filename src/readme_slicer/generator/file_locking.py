"""
Module: generator.file_locking

Purpose:
    Cross-platform lock that gives one generation run exclusive ownership
    of its output directory. Uses portalocker for Mac, Windows, and Linux
    compatibility.

Key Functions:
    - lock_path_for(): Lock file location for an output directory
    - output_dir_lock(): Context manager holding the lock for a run

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - generator.pipeline: Wraps clear + slice + write
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

import portalocker

logger = logging.getLogger(__name__)


class OutputLockedError(RuntimeError):
    """Raised when another run already owns the output directory."""


def lock_path_for(output_dir: Path) -> Path:
    """
    Lock file for an output directory.

    The lock lives next to the directory, not inside it, because the
    directory itself is deleted and recreated by the run.
    """
    output_dir = Path(output_dir)
    return output_dir.parent / f".{output_dir.name}.lock"


@contextmanager
def output_dir_lock(output_dir: Path) -> Generator[Path, None, None]:
    """
    Hold an exclusive, non-blocking lock on output_dir for the duration.

    Args:
        output_dir: Directory the run will clear and repopulate.

    Yields:
        Path of the lock file.

    Raises:
        OutputLockedError: If another process holds the lock.

    Example:
        >>> with output_dir_lock(Path("generated")):
        ...     regenerate()
    """
    lock_path = lock_path_for(output_dir)
    lock_path.parent.mkdir(parents=True, exist_ok=True)

    with open(lock_path, "a", encoding="utf-8") as f:
        try:
            portalocker.lock(f, portalocker.LOCK_EX | portalocker.LOCK_NB)
        except portalocker.exceptions.LockException as e:
            raise OutputLockedError(
                f"Output directory is in use by another run: {output_dir}"
            ) from e
        logger.debug(f"Acquired lock {lock_path}")
        try:
            yield lock_path
        finally:
            portalocker.unlock(f)
            logger.debug(f"Released lock {lock_path}")
