"""Shared pytest fixtures for agentcache tests."""

import hashlib
import io
from pathlib import Path
from typing import Any

import pytest

from agentcache.adapters import LocalFilesystemAdapter
from agentcache.core import AgentCacheConfig, CacheManager
from agentcache.ports import HttpResponse

TARBALL_URL = "https://example.com/agent/ecs-agent-latest.tar"
CHECKSUM_URL = TARBALL_URL + ".md5"
AGENT_BYTES = b"agent image layer " * 2048


def md5_hex(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


class FakeTransport:
    """Scripted transport returning canned responses per URL."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, Any, Exception | None]] = {}
        self.requested: list[str] = []
        self.responses: list[HttpResponse] = []

    def add(
        self,
        url: str,
        body: bytes | io.RawIOBase = b"",
        status: int = 200,
        error: Exception | None = None,
    ) -> None:
        self.routes[url] = (status, body, error)

    def get(self, url: str) -> HttpResponse:
        self.requested.append(url)
        status, body, error = self.routes[url]
        if error is not None:
            raise error
        stream = io.BytesIO(body) if isinstance(body, bytes) else body
        response = HttpResponse(status_code=status, body=stream)
        self.responses.append(response)
        return response

    def all_closed(self) -> bool:
        return all(response.body.closed for response in self.responses)


class RecordingLogger:
    """Logger port that keeps every record in memory."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def debug(self, message: str, **kwargs: Any) -> None:
        self.records.append(("debug", message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.records.append(("info", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.records.append(("warning", message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.records.append(("error", message, kwargs))

    def log_operation(self, op: str, url: str, sizes=None, durations=None, **kwargs: Any) -> None:
        self.records.append(("operation", op, {"url": url, "sizes": sizes, **kwargs}))

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


class RecordingMetrics:
    """Metrics port that counts calls by name."""

    def __init__(self) -> None:
        self.counters: dict[str, int] = {}
        self.gauges: dict[str, float] = {}
        self.timings: dict[str, float] = {}

    def increment(self, name: str, value: int = 1, tags=None) -> None:
        self.counters[name] = self.counters.get(name, 0) + value

    def gauge(self, name: str, value: float, tags=None) -> None:
        self.gauges[name] = value

    def timing(self, name: str, value: float, tags=None) -> None:
        self.timings[name] = value


class MemoryFilesystem(LocalFilesystemAdapter):
    """Filesystem whose open() serves in-memory files."""

    def __init__(self, files: dict[str, bytes]) -> None:
        self.files = files
        self.opened: list[io.BytesIO] = []

    def open(self, path: Path) -> io.BytesIO:
        try:
            data = self.files[str(path)]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", str(path)) from None
        stream = io.BytesIO(data)
        self.opened.append(stream)
        return stream


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def config(cache_dir: Path) -> AgentCacheConfig:
    return AgentCacheConfig(cache_dir=cache_dir, remote_tarball=TARBALL_URL)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def metrics() -> RecordingMetrics:
    return RecordingMetrics()


@pytest.fixture
def manager(config, transport, logger, metrics) -> CacheManager:
    return CacheManager(
        config=config,
        transport=transport,
        fs=LocalFilesystemAdapter(),
        logger=logger,
        metrics=metrics,
    )


@pytest.fixture
def published_agent(transport: FakeTransport) -> bytes:
    """Serve AGENT_BYTES and its checksum."""
    transport.add(CHECKSUM_URL, (md5_hex(AGENT_BYTES) + "\n").encode())
    transport.add(TARBALL_URL, AGENT_BYTES)
    return AGENT_BYTES
