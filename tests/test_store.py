import pytest

from metricsdb.metric import Metric
from metricsdb.store import InMemoryStore


def _metric(ts, name="cpu"):
    return Metric(timestamp=ts, name=name, labels=[("host", "alpha")])


def test_query_unknown_is_none(tmp_path):
    assert InMemoryStore(tmp_path).query("missing") is None


def test_insert_and_query_keep_order(tmp_path):
    store = InMemoryStore(tmp_path)
    first, second = _metric(1), _metric(2)
    other = _metric(3, name="mem")
    store.insert(first)
    store.insert(other)
    store.insert(second)
    assert store.query("cpu") == [first, second]
    assert store.query("mem") == [other]


def test_flush_when_count_reached(tmp_path):
    store = InMemoryStore(tmp_path, flush_max=2)
    first, second = _metric(10), _metric(11)
    target = tmp_path / "cpu.metricdata"
    store.insert(first)
    assert not target.exists()
    store.insert(second)
    assert target.read_bytes() == first.serialize() + second.serialize()


def test_flush_writes_whole_series_again(tmp_path):
    store = InMemoryStore(tmp_path, flush_max=2)
    metrics = [_metric(ts) for ts in (1, 2, 3, 4)]
    target = tmp_path / "cpu.metricdata"
    for metric in metrics[:3]:
        store.insert(metric)
    after_first = target.read_bytes()
    assert after_first == b"".join(m.serialize() for m in metrics[:2])
    store.insert(metrics[3])
    assert target.read_bytes() == after_first + b"".join(m.serialize() for m in metrics)
    assert store.query("cpu") == metrics


def test_flush_unknown_metric(tmp_path):
    with pytest.raises(KeyError):
        InMemoryStore(tmp_path).flush_metric("missing")