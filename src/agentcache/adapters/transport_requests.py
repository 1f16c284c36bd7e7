"""HTTP transport adapter using requests."""

import io
from collections.abc import Iterator
from typing import Any

import requests

from ..ports.transport import HttpResponse

CHUNK_SIZE = 8192


class ChunkStream(io.RawIOBase):
    """File-like view over ``Response.iter_content``.

    Reading through iter_content keeps mid-body failures (truncated bodies,
    resets, read timeouts) inside the requests exception hierarchy.
    """

    def __init__(self, chunks: Iterator[bytes]):
        super().__init__()
        self.chunks = chunks
        self.pending = b""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int:
        while not self.pending:
            try:
                self.pending = next(self.chunks)
            except StopIteration:
                return 0
        n = min(len(buffer), len(self.pending))
        buffer[:n] = self.pending[:n]
        self.pending = self.pending[n:]
        return n


class RequestsTransportAdapter:
    """Transport port backed by a requests session.

    Proxy settings are taken from the environment by requests itself.
    """

    def __init__(self, timeout: float = 60.0, session: requests.Session | None = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def get(self, url: str) -> HttpResponse:
        response = self.session.get(url, stream=True, timeout=self.timeout)
        return HttpResponse(
            status_code=response.status_code,
            body=ChunkStream(response.iter_content(CHUNK_SIZE)),  # type: ignore[arg-type]
            release=response.close,
        )
