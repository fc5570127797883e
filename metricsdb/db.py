"""The metrics database: an in-memory store recovered from write-ahead logs."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import List, Optional, Type, Union

from metricsdb.files import PathLike
from metricsdb.metric import Metric
from metricsdb.serialization import DeserializeError
from metricsdb.store import InMemoryStore
from metricsdb.wal import WAL_DIR, WalWriter

logger = logging.getLogger(__name__)


class MetricNotFoundError(LookupError):
    """Raised when a queried metric has no series."""


class MetricsDb:
    """Holds metrics in memory; on start it replays and removes old WAL files."""

    def __init__(self, wal_dir: PathLike = WAL_DIR, data_dir: PathLike = ".") -> None:
        self._store = InMemoryStore(data_dir)
        self._recover(Path(wal_dir))
        # The new log is opened after recovery so it is not replayed and removed.
        self._wal_writer = WalWriter.create(wal_dir)

    def _recover(self, wal_dir: Path) -> None:
        if not wal_dir.is_dir():
            logger.info("Path %s not found!", wal_dir)
            return
        for entry in sorted(path for path in wal_dir.iterdir() if path.is_file()):
            logger.info("%s", entry)
            data = entry.read_bytes()
            if not data:
                logger.info("File: %s is empty! Skipping...", entry)
                continue
            offset = 0
            while offset < len(data):
                try:
                    metric, offset = Metric.deserialize(data, offset)
                except DeserializeError:
                    break
                self.ingest(metric)
            entry.unlink()

    def ingest(self, metric: Metric) -> None:
        """Store ``metric``."""
        self._store.insert(metric)

    def query(self, name: str) -> List[Metric]:
        """Return the series called ``name``; raise MetricNotFoundError if there is none."""
        series = self._store.query(name)
        if series is None:
            raise MetricNotFoundError(f"Metric not found: {name}")
        return series

    def close(self) -> None:
        """Shut the database down, closing its log."""
        logger.info("Shutdown!")
        self._wal_writer.close()

    def __enter__(self) -> "MetricsDb":
        return self

    def __exit__(
        self,
        *args: Optional[Union[Type[BaseException], BaseException, TracebackType]],
    ) -> None:
        self.close()