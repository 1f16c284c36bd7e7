"""Core domain logic."""

from .config import AgentCacheConfig
from .errors import (
    AgentCacheError,
    IntegrityMismatchError,
    MalformedLocatorError,
    UnexpectedStatusError,
)
from .service import CacheManager

__all__ = [
    "AgentCacheConfig",
    "AgentCacheError",
    "CacheManager",
    "IntegrityMismatchError",
    "MalformedLocatorError",
    "UnexpectedStatusError",
]
