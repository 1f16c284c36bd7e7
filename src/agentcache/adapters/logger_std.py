"""Standard library logging adapter."""

import logging
import sys
from typing import Any

LOGGER_NAME = "agentcache"


class StdLoggerAdapter:
    """Logger port backed by the logging module."""

    def __init__(self, name: str = LOGGER_NAME, level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
            self.logger.addHandler(handler)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def log_operation(
        self,
        op: str,
        url: str,
        sizes: dict[str, int] | None = None,
        durations: dict[str, float] | None = None,
        **kwargs: Any,
    ) -> None:
        fields: dict[str, Any] = {"op": op, "url": url}
        for name, size in (sizes or {}).items():
            fields[f"{name}_size"] = size
        for name, duration in (durations or {}).items():
            fields[f"{name}_duration"] = f"{duration:.3f}s"
        fields.update(kwargs)
        self._log(logging.INFO, "Operation completed", fields)

    def _log(self, level: int, message: str, fields: dict[str, Any]) -> None:
        if fields:
            details = " ".join(f"{key}={value}" for key, value in fields.items())
            message = f"{message} [{details}]"
        self.logger.log(level, message)
