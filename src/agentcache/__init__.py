"""agentcache - verified on-disk cache of the agent image."""

from ._version import __version__
from .core import (
    AgentCacheConfig,
    AgentCacheError,
    CacheManager,
    IntegrityMismatchError,
    MalformedLocatorError,
    UnexpectedStatusError,
)

__all__ = [
    "AgentCacheConfig",
    "AgentCacheError",
    "CacheManager",
    "IntegrityMismatchError",
    "MalformedLocatorError",
    "UnexpectedStatusError",
    "__version__",
]
