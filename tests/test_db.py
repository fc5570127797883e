import re

import pytest

from metricsdb.db import MetricNotFoundError, MetricsDb
from metricsdb.metric import Metric


@pytest.fixture
def dirs(tmp_path):
    wal_dir = tmp_path / "wals"
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return wal_dir, data_dir


def test_missing_wal_dir_is_created_with_one_log(dirs):
    wal_dir, data_dir = dirs
    with MetricsDb(wal_dir=wal_dir, data_dir=data_dir):
        files = list(wal_dir.iterdir())
    assert len(files) == 1
    assert re.fullmatch(r"wal_\d+\.bin", files[0].name)


def test_ingest_and_query(dirs):
    wal_dir, data_dir = dirs
    metric = Metric(timestamp=1622547800, name="test_metric", labels=[("label1", "value1")])
    with MetricsDb(wal_dir=wal_dir, data_dir=data_dir) as db:
        db.ingest(metric)
        assert db.query("test_metric") == [metric]


def test_query_missing_raises(dirs):
    wal_dir, data_dir = dirs
    with MetricsDb(wal_dir=wal_dir, data_dir=data_dir) as db:
        with pytest.raises(MetricNotFoundError, match="Metric not found: nothing"):
            db.query("nothing")


def test_recovers_metrics_in_file_order_and_removes_logs(dirs):
    wal_dir, data_dir = dirs
    wal_dir.mkdir()
    first = Metric(timestamp=1622547800, name="test_metric", labels=[("label1", "value1")])
    second = Metric(timestamp=1622547801, name="test_metric", labels=[("label2", "value2")])
    (wal_dir / "a.bin").write_bytes(first.serialize())
    (wal_dir / "b.bin").write_bytes(second.serialize())
    with MetricsDb(wal_dir=wal_dir, data_dir=data_dir) as db:
        assert db.query("test_metric") == [first, second]
        remaining = [path.name for path in wal_dir.iterdir()]
    assert "a.bin" not in remaining
    assert "b.bin" not in remaining
    assert len(remaining) == 1


def test_zero_filled_log_is_skipped_and_removed(dirs):
    wal_dir, data_dir = dirs
    wal_dir.mkdir()
    (wal_dir / "a.bin").write_bytes(bytes(64))
    with MetricsDb(wal_dir=wal_dir, data_dir=data_dir) as db:
        assert not (wal_dir / "a.bin").exists()
        with pytest.raises(MetricNotFoundError):
            db.query("test_metric")


def test_empty_log_is_left_in_place(dirs):
    wal_dir, data_dir = dirs
    wal_dir.mkdir()
    (wal_dir / "a.bin").write_bytes(b"")
    with MetricsDb(wal_dir=wal_dir, data_dir=data_dir):
        assert (wal_dir / "a.bin").read_bytes() == b""


def test_close_twice_is_harmless(dirs):
    wal_dir, data_dir = dirs
    db = MetricsDb(wal_dir=wal_dir, data_dir=data_dir)
    db.close()
    db.close()
    metric = Metric(timestamp=5, name="after")
    db.ingest(metric)
    assert db.query("after") == [metric]