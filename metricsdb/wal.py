"""Write-ahead log writer."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Optional, Type, Union

from metricsdb.files import KIB, PathLike, create_file_timed

WAL_DIR = "wals/"

logger = logging.getLogger(__name__)


class WalWriter:
    """Appends records to a log file, flushing every ``flush_interval`` writes."""

    def __init__(self, file: BinaryIO, flush_interval: int = 100) -> None:
        if flush_interval < 1:
            raise ValueError(f"flush_interval must be positive: {flush_interval}")
        self._file = file
        self._flush_interval = flush_interval
        self._count = 0

    @classmethod
    def create(cls, wal_dir: Union[PathLike, Path] = WAL_DIR) -> "WalWriter":
        """Open a new timestamped ``wal.bin`` file of 4 KiB in ``wal_dir``."""
        handle = create_file_timed(Path(wal_dir) / "wal.bin", KIB * 4)
        return cls(handle, flush_interval=10)

    def write(self, data: bytes) -> None:
        """Append ``data`` as one record."""
        self._file.write(data)
        self._count += 1
        if self._count % self._flush_interval == 0:
            logger.debug("Flushing writer after %d writes", self._count)
            self.flush()

    def flush(self) -> None:
        """Push buffered records to the file."""
        self._file.flush()

    def close(self) -> None:
        """Flush and close the file; closing twice is harmless."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def __enter__(self) -> "WalWriter":
        return self

    def __exit__(
        self,
        *args: Optional[Union[Type[BaseException], BaseException, TracebackType]],
    ) -> None:
        self.close()