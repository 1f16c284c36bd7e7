"""Local filesystem adapter."""

import io
import os
import tempfile
from pathlib import Path
from typing import Any, BinaryIO

from ..ports.filesystem import FileStat

CHUNK_SIZE = 8192


class TeeReader(io.RawIOBase):
    """Read-through stream that feeds every byte it returns to a hasher."""

    def __init__(self, src: BinaryIO, hasher: Any):
        super().__init__()
        self.src = src
        self.hasher = hasher

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        data = self.src.read(size)
        if data:
            self.hasher.update(data)
        return data

    def readinto(self, buffer: Any) -> int:
        data = self.read(len(buffer))
        n = len(data)
        buffer[:n] = data
        return n


class LocalFilesystemAdapter:
    """Filesystem port backed by the os module."""

    def stat(self, path: Path) -> FileStat:
        return FileStat(size=os.stat(path).st_size)

    def mkdir_all(self, path: Path, mode: int) -> None:
        os.makedirs(path, mode=mode, exist_ok=True)

    def temp_file(self, directory: Path, prefix: str) -> BinaryIO:
        return tempfile.NamedTemporaryFile(dir=directory, prefix=prefix, delete=False)

    def copy(self, dst: BinaryIO, src: BinaryIO) -> int:
        written = 0
        for chunk in iter(lambda: src.read(CHUNK_SIZE), b""):
            dst.write(chunk)
            written += len(chunk)
        return written

    def tee_reader(self, src: BinaryIO, hasher: Any) -> BinaryIO:
        return TeeReader(src, hasher)  # type: ignore[return-value]

    def rename(self, old: Path, new: Path) -> None:
        os.replace(old, new)

    def remove(self, path: Path) -> None:
        os.remove(path)

    def write_file(self, path: Path, data: bytes, mode: int) -> None:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "wb") as f:
            f.write(data)

    def read_all(self, stream: BinaryIO) -> bytes:
        return stream.read()

    def open(self, path: Path) -> BinaryIO:
        return open(path, "rb")

    def base(self, path: str) -> str:
        """Last element of path, ignoring trailing separators."""
        stripped = path.rstrip("/")
        if not stripped:
            return "/" if path else "."
        return os.path.basename(stripped)
