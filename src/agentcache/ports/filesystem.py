"""Filesystem port interface."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Protocol


@dataclass(frozen=True)
class FileStat:
    """Subset of stat information the cache looks at."""

    size: int


class FilesystemPort(Protocol):
    """Port for filesystem operations."""

    def stat(self, path: Path) -> FileStat:
        """Stat a path. Raises OSError if it does not exist."""
        ...

    def mkdir_all(self, path: Path, mode: int) -> None:
        """Create a directory tree. No-op if already present."""
        ...

    def temp_file(self, directory: Path, prefix: str) -> BinaryIO:
        """Create a uniquely named writable file in directory."""
        ...

    def copy(self, dst: BinaryIO, src: BinaryIO) -> int:
        """Stream src into dst, returning the number of bytes copied."""
        ...

    def tee_reader(self, src: BinaryIO, hasher: Any) -> BinaryIO:
        """Wrap src so every read also updates hasher."""
        ...

    def rename(self, old: Path, new: Path) -> None:
        """Atomically replace new with old."""
        ...

    def remove(self, path: Path) -> None:
        """Delete a file."""
        ...

    def write_file(self, path: Path, data: bytes, mode: int) -> None:
        """Write a whole file, creating it with mode if missing."""
        ...

    def read_all(self, stream: BinaryIO) -> bytes:
        """Read a stream to EOF."""
        ...

    def open(self, path: Path) -> BinaryIO:
        """Open a file for reading."""
        ...

    def base(self, path: str) -> str:
        """Return the last element of path."""
        ...
