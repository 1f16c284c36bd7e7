"""Port interfaces for agentcache."""

from .filesystem import FileStat, FilesystemPort
from .logger import LoggerPort
from .metrics import MetricsPort
from .transport import HttpResponse, TransportPort

__all__ = [
    "FileStat",
    "FilesystemPort",
    "HttpResponse",
    "LoggerPort",
    "MetricsPort",
    "TransportPort",
]
