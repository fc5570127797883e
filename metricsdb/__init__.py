"""An in-memory time-series metrics store with WAL recovery, a TCP server, a client and supporting collections."""

__version__ = "0.1.0"