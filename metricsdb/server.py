"""TCP front end of the metrics database.

Each connection carries one request. Its first byte selects the operation:
0 reads a series by name and 1 writes one serialized metric.
"""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import struct
import sys
from enum import IntEnum
from typing import Any, List, Optional, Sequence, Union

from metricsdb.db import MetricNotFoundError, MetricsDb
from metricsdb.metric import Metric
from metricsdb.serialization import DeserializeError
from metricsdb.wal import WAL_DIR

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 1227

_READ_SIZE = 8192
_U32 = struct.Struct("<I")

logger = logging.getLogger(__name__)


class Operation(IntEnum):
    """The control byte that starts every request."""

    READ = 0
    WRITE = 1


class ProtocolError(ValueError):
    """Raised when a request cannot be understood."""


def handle_read(content: bytes, db: MetricsDb) -> List[Metric]:
    """Decode a length-prefixed series name and return that series from ``db``."""
    if len(content) < _U32.size:
        raise ProtocolError("Read request is too short")
    (length,) = _U32.unpack_from(content, 0)
    raw = bytes(content[_U32.size:_U32.size + length])
    if len(raw) < length:
        raise ProtocolError("Read request name is truncated")
    try:
        name = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ProtocolError("Read request name is not valid UTF-8") from exc
    return db.query(name)


def handle_write(content: bytes, db: MetricsDb) -> Metric:
    """Decode one metric from ``content``, store it in ``db`` and return it."""
    try:
        metric, _ = Metric.deserialize(bytes(content), 0)
    except DeserializeError as exc:
        raise ProtocolError(f"Invalid metric: {exc}") from exc
    db.ingest(metric)
    return metric


def handle_request(data: bytes, db: MetricsDb) -> Optional[List[Metric]]:
    """Run one request; a read returns its series, a write returns None."""
    if not data:
        raise ProtocolError("Empty request")
    control, content = data[0], bytes(data[1:])
    try:
        operation = Operation(control)
    except ValueError:
        logger.error("Unknown control byte: %d", control)
        raise ProtocolError(f"Unknown control byte: {control}") from None
    if operation is Operation.READ:
        return handle_read(content, db)
    handle_write(content, db)
    return None


async def handle_client(
    reader: asyncio.StreamReader, writer: Any, db: MetricsDb
) -> Optional[List[Metric]]:
    """Read one request from the connection, run it, then close the connection."""
    try:
        data = await reader.read(_READ_SIZE)
        return handle_request(data, db)
    finally:
        writer.close()
        with contextlib.suppress(ConnectionError):
            await writer.wait_closed()


async def serve(
    host: str = DEFAULT_HOST, port: int = DEFAULT_PORT, db: Optional[MetricsDb] = None
) -> None:
    """Accept connections on ``host``:``port`` until cancelled.

    When no database is given, one is opened with default paths and closed on exit.
    """
    own_db = db is None
    database = db if db is not None else MetricsDb()

    async def on_connect(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        logger.info("New connection from %s", writer.get_extra_info("peername"))
        try:
            await handle_client(reader, writer, database)
        except (ProtocolError, MetricNotFoundError, OSError) as exc:
            logger.error("Request failed: %s", exc)

    try:
        server = await asyncio.start_server(on_connect, host, port)
        logger.info("Server is listening on %s:%d", host, port)
        async with server:
            await server.serve_forever()
    finally:
        if own_db:
            database.close()


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the metrics database server.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="address to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to bind")
    parser.add_argument("--wal-dir", default=WAL_DIR, help="directory of write-ahead logs")
    parser.add_argument("--data-dir", default=".", help="directory of flushed series")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the server and run until interrupted."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    with MetricsDb(wal_dir=args.wal_dir, data_dir=args.data_dir) as db:
        try:
            asyncio.run(serve(args.host, args.port, db))
        except KeyboardInterrupt:
            return 0
        except OSError as exc:
            print(f"Failed to bind to address {args.host}:{args.port}: {exc}", file=sys.stderr)
            return 1
    return 0


Response = Union[List[Metric], None]

if __name__ == "__main__":
    sys.exit(main())