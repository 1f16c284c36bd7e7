"""Metrics adapter that writes to the log."""

import logging

from .logger_std import LOGGER_NAME


class LoggingMetricsAdapter:
    """Reports metrics as debug log lines."""

    def __init__(self, name: str = f"{LOGGER_NAME}.metrics"):
        self.logger = logging.getLogger(name)

    def increment(self, name: str, value: int = 1, tags: dict[str, str] | None = None) -> None:
        self.logger.debug("counter %s +%d%s", name, value, self._format_tags(tags))

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self.logger.debug("gauge %s=%s%s", name, value, self._format_tags(tags))

    def timing(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self.logger.debug("timing %s=%.3fs%s", name, value, self._format_tags(tags))

    @staticmethod
    def _format_tags(tags: dict[str, str] | None) -> str:
        if not tags:
            return ""
        return " " + ",".join(f"{k}={v}" for k, v in sorted(tags.items()))
