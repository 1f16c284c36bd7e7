"""Centralized configuration and cache locations for agentcache."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CACHE_DIRECTORY = "/var/cache/ecs"
DEFAULT_REMOTE_TARBALL = "https://s3.amazonaws.com/amazon-ecs-agent/ecs-agent-latest.tar"

AGENT_FILENAME = "ecs-agent.tar"
CACHE_STATE_FILENAME = "state"
DESIRED_IMAGE_FILENAME = "desired-image"


@dataclass(slots=True)
class AgentCacheConfig:
    """All agentcache configuration in one place.

    Environment variables (all optional):
        AGENTCACHE_DIR:             Cache directory. Default "/var/cache/ecs".
        AGENTCACHE_REMOTE_TARBALL:  URL of the published agent tarball.
        AGENTCACHE_REMOTE_CHECKSUM: URL of the tarball's MD5 checksum.
                                    Default: tarball URL + ".md5".
        AGENTCACHE_HTTP_TIMEOUT:    Transport timeout in seconds. Default 60.
        AGENTCACHE_LOG_LEVEL:       Logging level. Default "INFO".
        AGENTCACHE_METRICS:         Metrics backend: "noop" or "logging" (default).
    """

    cache_dir: Path = Path(DEFAULT_CACHE_DIRECTORY)
    remote_tarball: str = DEFAULT_REMOTE_TARBALL
    remote_checksum: str | None = None
    http_timeout: float = 60.0
    log_level: str = "INFO"
    metrics_type: str = "logging"

    @classmethod
    def from_env(
        cls,
        *,
        log_level: str = "INFO",
        cache_dir: str | Path | None = None,
        remote_tarball: str | None = None,
    ) -> "AgentCacheConfig":
        """Build config from environment variables + explicit overrides."""
        if cache_dir is None:
            cache_dir = os.environ.get("AGENTCACHE_DIR", DEFAULT_CACHE_DIRECTORY)
        if remote_tarball is None:
            remote_tarball = os.environ.get("AGENTCACHE_REMOTE_TARBALL", DEFAULT_REMOTE_TARBALL)
        return cls(
            cache_dir=Path(cache_dir),
            remote_tarball=remote_tarball,
            remote_checksum=os.environ.get("AGENTCACHE_REMOTE_CHECKSUM") or None,
            http_timeout=float(os.environ.get("AGENTCACHE_HTTP_TIMEOUT", "60")),
            log_level=os.environ.get("AGENTCACHE_LOG_LEVEL", log_level),
            metrics_type=os.environ.get("AGENTCACHE_METRICS", "logging"),
        )

    @property
    def cache_directory(self) -> Path:
        return self.cache_dir

    @property
    def cache_state(self) -> Path:
        """Marker whose non-empty presence means a fetch was recorded."""
        return self.cache_dir / CACHE_STATE_FILENAME

    @property
    def agent_tarball(self) -> Path:
        return self.cache_dir / AGENT_FILENAME

    @property
    def desired_image_locator_file(self) -> Path:
        """Pointer file naming a pre-staged image inside the cache directory."""
        return self.cache_dir / DESIRED_IMAGE_FILENAME

    @property
    def agent_remote_tarball(self) -> str:
        return self.remote_tarball

    @property
    def agent_remote_tarball_md5(self) -> str:
        if self.remote_checksum:
            return self.remote_checksum
        return self.remote_tarball + ".md5"
