"""Transport port interface."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import BinaryIO, Protocol


@dataclass
class HttpResponse:
    """Status code and body stream of an HTTP GET."""

    status_code: int
    body: BinaryIO
    release: Callable[[], None] | None = field(default=None, repr=False)

    def close(self) -> None:
        """Close the body and release the underlying connection."""
        try:
            self.body.close()
        finally:
            if self.release is not None:
                self.release()

    def __enter__(self) -> "HttpResponse":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class TransportPort(Protocol):
    """Port for HTTP operations."""

    def get(self, url: str) -> HttpResponse:
        """Issue a GET request. The caller closes the response."""
        ...
