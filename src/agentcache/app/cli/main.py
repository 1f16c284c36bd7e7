"""CLI main entry point."""

import json
import shutil
import sys
from pathlib import Path

import click

from ...adapters import (
    LocalFilesystemAdapter,
    LoggingMetricsAdapter,
    NoopMetricsAdapter,
    RequestsTransportAdapter,
    StdLoggerAdapter,
)
from ...core import AgentCacheConfig, AgentCacheError, CacheManager
from ...ports import MetricsPort


def create_manager(config: AgentCacheConfig) -> CacheManager:
    """Create cache manager with wired adapters."""
    metrics: MetricsPort
    if config.metrics_type == "noop":
        metrics = NoopMetricsAdapter()
    else:
        metrics = LoggingMetricsAdapter()

    return CacheManager(
        config=config,
        transport=RequestsTransportAdapter(timeout=config.http_timeout),
        fs=LocalFilesystemAdapter(),
        logger=StdLoggerAdapter(level=config.log_level),
        metrics=metrics,
    )


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Cache directory (default: $AGENTCACHE_DIR or /var/cache/ecs)",
)
@click.option("--url", help="URL of the published agent tarball")
@click.pass_context
def cli(ctx: click.Context, debug: bool, cache_dir: Path | None, url: str | None) -> None:
    """agentcache - verified on-disk cache of the agent image."""
    config = AgentCacheConfig.from_env(cache_dir=cache_dir, remote_tarball=url)
    if debug:
        config.log_level = "DEBUG"
    ctx.obj = create_manager(config)


@cli.command()
@click.pass_obj
def status(manager: CacheManager) -> None:
    """Report whether a usable cached copy exists."""
    config = manager.config
    output = {
        "cached": manager.is_cached(),
        "cache_directory": str(config.cache_directory),
        "agent_tarball": str(config.agent_tarball),
        "cache_state": str(config.cache_state),
        "remote_tarball": config.agent_remote_tarball,
        "remote_checksum": config.agent_remote_tarball_md5,
    }

    try:
        output["desired_image"] = str(manager.desired_agent_path())
    except FileNotFoundError:
        output["desired_image"] = None
    except (OSError, AgentCacheError) as e:
        output["desired_image_error"] = str(e)

    click.echo(json.dumps(output, indent=2))


@cli.command()
@click.option(
    "--record/--no-record",
    default=True,
    help="Write the cache state marker after a verified download (default: record)",
)
@click.pass_obj
def fetch(manager: CacheManager, record: bool) -> None:
    """Download, verify and cache a fresh copy of the agent."""
    try:
        manager.fetch_and_cache()
        if record:
            manager.record_cached()
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Cached agent at {manager.config.agent_tarball}")


@cli.command()
@click.pass_obj
def record(manager: CacheManager) -> None:
    """Mark the cached agent as complete."""
    try:
        manager.record_cached()
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_obj
def ensure(manager: CacheManager) -> None:
    """Fetch the agent only if no usable cached copy exists."""
    try:
        fetched = manager.ensure_cached()
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    output = {
        "fetched": fetched,
        "agent_tarball": str(manager.config.agent_tarball),
    }
    click.echo(json.dumps(output, indent=2))


@cli.command()
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Output file path")
@click.option("--desired", is_flag=True, help="Load the image named by the desired-image file")
@click.pass_obj
def load(manager: CacheManager, output: Path | None, desired: bool) -> None:
    """Write the cached agent image to a file or stdout."""
    try:
        source = manager.load_desired_agent() if desired else manager.load_cached_agent()
        with source:
            if output is None:
                stdout = click.get_binary_stream("stdout")
                shutil.copyfileobj(source, stdout)
                stdout.flush()
            else:
                with open(output, "wb") as f:
                    shutil.copyfileobj(source, f)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output is not None:
        click.echo(f"Successfully loaded: {output}", err=True)


def main() -> None:
    """Main entry point."""
    cli()
