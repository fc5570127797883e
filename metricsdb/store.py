"""In-memory series store that periodically writes a series to disk."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional

from metricsdb.files import PathLike, open_or_create
from metricsdb.metric import Metric


class InMemoryStore:
    """Keeps metrics by name; after ``flush_max`` inserts of a name its series is appended to disk."""

    def __init__(self, data_dir: PathLike = ".", flush_max: int = 1000) -> None:
        self._data_dir = Path(data_dir)
        self._flush_max = flush_max
        self._counts: Counter = Counter()
        self._series: Dict[str, List[Metric]] = {}

    def insert(self, metric: Metric) -> None:
        """Add ``metric`` to its series, flushing the series when its count is reached."""
        name = metric.name
        self._series.setdefault(name, []).append(metric)
        self._counts[name] += 1
        if self._counts[name] >= self._flush_max:
            self.flush_metric(name)
            self._counts[name] = 0

    def query(self, name: str) -> Optional[List[Metric]]:
        """Return the series called ``name``, or None if there is none."""
        return self._series.get(name)

    def flush_metric(self, name: str) -> None:
        """Append every metric of series ``name`` to ``<name>.metricdata``."""
        metrics = self._series.get(name)
        if metrics is None:
            raise KeyError(name)
        payload = b"".join(metric.serialize() for metric in metrics)
        with open_or_create(self._data_dir / f"{name}.metricdata") as handle:
            handle.write(payload)