"""Adapters for agentcache ports."""

from .filesystem_local import LocalFilesystemAdapter, TeeReader
from .logger_std import StdLoggerAdapter
from .metrics_logging import LoggingMetricsAdapter
from .metrics_noop import NoopMetricsAdapter
from .transport_requests import RequestsTransportAdapter

__all__ = [
    "LocalFilesystemAdapter",
    "LoggingMetricsAdapter",
    "NoopMetricsAdapter",
    "RequestsTransportAdapter",
    "StdLoggerAdapter",
    "TeeReader",
]
