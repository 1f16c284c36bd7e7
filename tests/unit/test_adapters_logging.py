"""Tests for the logging and metrics adapters."""

import logging

from agentcache.adapters import LoggingMetricsAdapter, NoopMetricsAdapter, StdLoggerAdapter


def test_std_logger_formats_fields(caplog):
    logger = StdLoggerAdapter(level="DEBUG")

    with caplog.at_level(logging.DEBUG, logger="agentcache"):
        logger.debug("Created temp file", path="/var/cache/ecs/ecs-agent.tar123")
        logger.info("Plain message")

    assert "Created temp file [path=/var/cache/ecs/ecs-agent.tar123]" in caplog.messages
    assert "Plain message" in caplog.messages


def test_log_operation_summary(caplog):
    logger = StdLoggerAdapter()

    with caplog.at_level(logging.INFO, logger="agentcache"):
        logger.log_operation(
            op="fetch",
            url="https://example.com/a.tar",
            sizes={"tarball": 10},
            durations={"total": 1.5},
        )

    assert caplog.messages == [
        "Operation completed [op=fetch url=https://example.com/a.tar "
        "tarball_size=10 total_duration=1.500s]"
    ]


def test_logging_metrics(caplog):
    metrics = LoggingMetricsAdapter()

    with caplog.at_level(logging.DEBUG, logger="agentcache.metrics"):
        metrics.increment("agentcache.fetch.failed")
        metrics.timing("agentcache.fetch.duration", 0.25, tags={"result": "ok"})

    assert caplog.messages == [
        "counter agentcache.fetch.failed +1",
        "timing agentcache.fetch.duration=0.250s result=ok",
    ]


def test_noop_metrics_accepts_everything():
    metrics = NoopMetricsAdapter()

    metrics.increment("a")
    metrics.gauge("b", 1.0)
    metrics.timing("c", 2.0)
