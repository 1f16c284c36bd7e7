"""Core CacheManager orchestration."""

import hashlib
import os
import time
from pathlib import Path
from typing import BinaryIO

from ..ports import FilesystemPort, HttpResponse, LoggerPort, MetricsPort, TransportPort
from .config import AGENT_FILENAME, AgentCacheConfig
from .errors import IntegrityMismatchError, MalformedLocatorError, UnexpectedStatusError

OWNER_RWX = 0o700
CACHED_SENTINEL = b"1"


class CacheManager:
    """Maintains the on-disk cache of the agent image.

    The cache is either absent or present-and-intact. Downloads land in a
    temporary file next to the tarball and are promoted with a single rename
    once their MD5 matches the published checksum. Completion is recorded
    separately with ``record_cached()`` so that a crash between the two steps
    reads back as "not cached".
    """

    def __init__(
        self,
        config: AgentCacheConfig,
        transport: TransportPort,
        fs: FilesystemPort,
        logger: LoggerPort,
        metrics: MetricsPort,
    ):
        self.config = config
        self.transport = transport
        self.fs = fs
        self.logger = logger
        self.metrics = metrics

    def is_cached(self) -> bool:
        """Return True if both the state marker and the tarball are non-empty.

        No validation is performed on the contents of either file.
        """
        return self._file_not_empty(self.config.cache_state) and self._file_not_empty(
            self.config.agent_tarball
        )

    def _file_not_empty(self, path: Path) -> bool:
        try:
            info = self.fs.stat(path)
        except OSError:
            return False
        return info.size > 0

    def fetch_and_cache(self) -> None:
        """Download a fresh copy of the agent and verify it before caching.

        Raises:
            UnexpectedStatusError: a remote endpoint did not answer 200
            IntegrityMismatchError: the tarball does not match the published MD5
            OSError: filesystem failures, surfaced unchanged
        """
        start_time = time.monotonic()
        url = self.config.agent_remote_tarball

        self.logger.info("Starting agent download", url=url)
        try:
            size = self._download_agent()
        except Exception as e:
            self.logger.error("Agent download failed", url=url, error=str(e))
            self.metrics.increment("agentcache.fetch.failed")
            raise

        duration = time.monotonic() - start_time
        self.logger.log_operation(
            op="fetch",
            url=url,
            sizes={"tarball": size},
            durations={"total": duration},
        )
        self.metrics.timing("agentcache.fetch.duration", duration)
        self.metrics.gauge("agentcache.fetch.bytes", size)

    def _download_agent(self) -> int:
        cache_dir = self.config.cache_directory
        self.fs.mkdir_all(cache_dir, OWNER_RWX)

        published_md5 = self._get_published_md5()

        with self._get_published_tarball() as response:
            md5 = hashlib.md5()
            temp_file = self.fs.temp_file(cache_dir, AGENT_FILENAME)
            temp_path = Path(temp_file.name)

            committed = False
            try:
                with temp_file:
                    self.logger.debug("Created temp file", path=str(temp_path))
                    size = self.fs.copy(temp_file, self.fs.tee_reader(response.body, md5))

                calculated_md5 = md5.hexdigest()
                self.logger.debug("Expected checksum", md5=published_md5)
                self.logger.debug("Calculated checksum", md5=calculated_md5)
                if calculated_md5 != published_md5:
                    self.metrics.increment("agentcache.fetch.checksum_mismatch")
                    raise IntegrityMismatchError(
                        self.config.agent_remote_tarball, published_md5, calculated_md5
                    )

                self.logger.debug(
                    "Renaming temp file",
                    src=str(temp_path),
                    dst=str(self.config.agent_tarball),
                )
                self.fs.rename(temp_path, self.config.agent_tarball)
                committed = True
            finally:
                if not committed:
                    self._discard_temp_file(temp_path)

        return size

    def _discard_temp_file(self, path: Path) -> None:
        self.logger.debug("Removing temp file", path=str(path))
        try:
            self.fs.remove(path)
        except OSError as e:
            self.logger.warning("Could not remove temp file", path=str(path), error=str(e))

    def _get_published_md5(self) -> str:
        url = self.config.agent_remote_tarball_md5
        self.logger.debug("Downloading published checksum", url=url)
        with self.transport.get(url) as response:
            if response.status_code != 200:
                raise UnexpectedStatusError(response.status_code, url)
            body = self.fs.read_all(response.body)
        return body.decode("utf-8", errors="replace").strip()

    def _get_published_tarball(self) -> HttpResponse:
        url = self.config.agent_remote_tarball
        self.logger.debug("Downloading agent tarball", url=url)
        response = self.transport.get(url)
        if response.status_code != 200:
            response.close()
            raise UnexpectedStatusError(response.status_code, url)
        return response

    def record_cached(self) -> None:
        """Mark the cached tarball as complete."""
        self.fs.write_file(self.config.cache_state, CACHED_SENTINEL, OWNER_RWX)

    def ensure_cached(self) -> bool:
        """Fetch and record the agent unless a usable copy is cached.

        Returns:
            True if a download happened, False if the cache was already usable
        """
        if self.is_cached():
            self.logger.info("Agent already cached", path=str(self.config.agent_tarball))
            return False
        self.fetch_and_cache()
        self.record_cached()
        return True

    def load_cached_agent(self) -> BinaryIO:
        """Open the cached agent tarball."""
        return self.fs.open(self.config.agent_tarball)

    def load_desired_agent(self) -> BinaryIO:
        """Open the image named by the desired-image locator file.

        The locator must start with the name of a file in the cache directory
        (interpreted as a basename) followed by a newline. Only the first line
        is read; the rest of the file is reserved.
        """
        return self.fs.open(self.desired_agent_path())

    def desired_agent_path(self) -> Path:
        """Resolve the desired-image locator to a path in the cache directory."""
        locator = self.config.desired_image_locator_file
        with self.fs.open(locator) as f:
            line = f.readline()
        if not line.endswith(b"\n"):
            raise MalformedLocatorError(f"missing newline after image name in {locator}")

        name = self.fs.base(os.fsdecode(line))
        return Path(f"{self.config.cache_directory}/{name}".strip())
