"""Command that sends sample metrics to a running server."""

from __future__ import annotations

import argparse
import socket
import sys
import time
from typing import Optional, Sequence

from metricsdb.metric import Metric
from metricsdb.server import DEFAULT_HOST, DEFAULT_PORT, Operation


def encode_write_request(metric: Metric) -> bytes:
    """Return the bytes of a write request carrying ``metric``."""
    return bytes([Operation.WRITE]) + metric.serialize()


def send_metric(metric: Metric, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Open a connection and send ``metric`` as one write request."""
    with socket.create_connection((host, port)) as sock:
        sock.sendall(encode_write_request(metric))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send sample metrics to the server.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    parser.add_argument("--count", type=int, default=100, help="number of metrics to send")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send ``--count`` copies of a sample metric and report the rate."""
    args = _parse_args(argv)
    metric = Metric(
        timestamp=int(time.time()),
        name="test_metric",
        labels=[("test_label", "test_value")],
    )
    start = time.perf_counter()
    try:
        for _ in range(args.count):
            send_metric(metric, args.host, args.port)
    except OSError as exc:
        print(f"Failed to send trace: {exc}", file=sys.stderr)
        return 1
    seconds = time.perf_counter() - start
    rate = args.count / seconds if seconds > 0 else float("inf")
    print(f"Sent {args.count} metrics in {seconds:.2f} sec -> {rate:.2f} metrics/sec")
    return 0


if __name__ == "__main__":
    sys.exit(main())