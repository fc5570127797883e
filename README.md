# metricsdb

A small time-series metrics store. A `Metric` is a named record with a Unix
timestamp and a list of `(key, value)` string labels. `MetricsDb` keeps
metrics in memory, grouped by name. Each time `flush_max` (default 1000)
metrics of one name have been inserted, the whole series held so far is
appended to `<name>.metricdata` in the data directory. When a `MetricsDb`
starts, it replays the files in its WAL directory, deletes them, and opens a
new timestamped `wal_<millis>.bin` file there.

The package also holds general collections:

- `metricsdb.linked_list.PersistentList`: an immutable stack with `prepend`, `tail`, `head` and iteration.
- `metricsdb.linked_queue.LinkedQueue`: `push_front`, `pop_front`, `peek_front`.
- `metricsdb.fifo_list.FifoList`: `push`, `pop`, `peek_head`, `peek_tail`.
- `metricsdb.sorted_list.SortedList`: `add`, `pop` (smallest first), `peek_begin`, `seek_end`, iteration in order.
- `metricsdb.skip_list.SkipList`: a four-layer skip list with `add`, `contains`, `layer_head`, `len()` and ordered iteration; it takes an optional random generator.
- `metricsdb.trie.Trie`: `insert` and `contains` for whole words.
- `metricsdb.arena.Arena`: a fixed-capacity string buffer; `alloc_str` raises `MemoryError` when full, `reset` empties it.

## Installing

```
pip install .
pip install ".[test]"   # with the test tools
```

## Using the store

```python
from metricsdb.db import MetricsDb
from metricsdb.metric import Metric

with MetricsDb(wal_dir="wals", data_dir=".") as db:
    db.ingest(Metric(timestamp=1622547800, name="cpu", labels=[("host", "a")]))
    for metric in db.query("cpu"):
        print(metric.timestamp, metric.labels)
```

`query` raises `metricsdb.db.MetricNotFoundError` when no metric of that
name has been ingested. `InMemoryStore` in `metricsdb.store` is the
underlying store and can be used on its own.

## Binary format

`Metric.serialize()` gives the timestamp as a little-endian u64, then the
name, then each label key and value, each as a little-endian u32 length
followed by its UTF-8 bytes. `Metric.deserialize(data, offset)` returns the
metric and the offset after it. Labels are read up to the end of `data`, so
one buffer decodes to one metric. A timestamp of zero, or data that ends
early, raises `metricsdb.serialization.DeserializeError`.

`metricsdb.serialization.binary_serializable` is a class decorator that
gives a dataclass `serialize` and `deserialize`: `int` fields as u32,
`bool` as one byte, `bytes` and `str` as a u32 length and the content. An
empty string cannot be read back. Other field types raise `TypeError`.

## Server and client

Start the server (default 127.0.0.1:1227):

```
metricsdb-server [--host HOST] [--port PORT] [--wal-dir DIR] [--data-dir DIR]
```

Each connection carries one request: one control byte and its content.

- `1`: write. The content is one serialized metric, which is ingested.
- `0`: read. The content is a u32 length and a metric name, which is looked up.

Any other control byte raises `ProtocolError`; failed requests are logged.
`handle_request(data, db)` in `metricsdb.server` runs a request directly.

Send sample metrics (`test_metric`, default 100 of them) and see the rate:

```
metricsdb-client [--host HOST] [--port PORT] [--count N]
```

From Python, `encode_write_request(metric)` builds a write request and
`send_metric(metric, host, port)` sends one.

## What it does not do

- Ingested metrics are not written to the write-ahead log; only WAL files
  already present at start-up are replayed. Data held only in memory is lost
  when the process ends.
- `.metricdata` files are written but never read back.
- The server sends nothing back: a read request looks the series up but does
  not return it to the client.

## Tests

```
pytest
```