"""Helpers for opening and creating storage files and directories."""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import BinaryIO, Iterator, Union

KIB = 1024

PathLike = Union[str, "os.PathLike[str]"]


def create_file_timed(file_name: PathLike, capacity: int) -> BinaryIO:
    """Create ``<stem>_<millis><suffix>`` beside ``file_name``, sized to ``capacity`` bytes.

    Missing parent directories are created. The file is opened for reading and appending.
    """
    path = Path(file_name)
    timestamp = time.time_ns() // 1_000_000
    path.parent.mkdir(parents=True, exist_ok=True)
    new_path = path.with_name(f"{path.stem}_{timestamp}{path.suffix}")
    handle = open(new_path, "a+b")
    try:
        handle.truncate(capacity)
    except BaseException:
        handle.close()
        raise
    return handle


def open_or_create(file_name: PathLike) -> BinaryIO:
    """Open ``file_name`` for reading and appending, creating it if needed."""
    return open(file_name, "a+b")


def open_or_create_directory(path: PathLike) -> Iterator[Path]:
    """Return the entries of ``path``, creating the directory (not its parents) first if missing."""
    directory = Path(path)
    if not directory.exists():
        directory.mkdir()
    return directory.iterdir()