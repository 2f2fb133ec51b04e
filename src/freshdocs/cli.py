"""CLI interface for freshdocs.

Command-line tool for resolving and serving the latest blog post and
changelog entry of a documentation site.
"""

import json
import logging
from pathlib import Path

import click

from freshdocs.config import Config
from freshdocs.core.state import CONTENT_KINDS
from freshdocs.loader import load_build_state

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover freshdocs.toml)",
)
blog_dir_option = click.option(
    "--blog-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Blog content directory (overrides config)",
)
changelog_dir_option = click.option(
    "--changelog-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Changelog content directory (overrides config)",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)


@click.group()
def cli() -> None:
    """freshdocs - surface the latest blog post and changelog."""


@cli.command()
@config_option
@blog_dir_option
@changelog_dir_option
@click.option(
    "--kind",
    type=click.Choice(CONTENT_KINDS),
    default=None,
    help="Only print the latest entry of this collection",
)
@verbose_option
def latest(
    config_path: Path | None,
    blog_dir: Path | None,
    changelog_dir: Path | None,
    kind: str | None,
    verbose: bool,
) -> None:
    """Print the latest entries as JSON."""
    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        blog_dir=blog_dir,
        changelog_dir=changelog_dir,
    )

    state = load_build_state(config)

    if kind is None:
        click.echo(json.dumps(state.to_dict(), indent=2))
        return

    entry = state.get(kind)
    click.echo(json.dumps(entry.to_dict() if entry else None, indent=2))


@cli.command()
@config_option
@blog_dir_option
@changelog_dir_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@verbose_option
def serve(
    config_path: Path | None,
    blog_dir: Path | None,
    changelog_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the latest-entries API server."""
    from freshdocs.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        blog_dir=blog_dir,
        changelog_dir=changelog_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Blog directory: {config.blog.content_dir}")
    click.echo(f"Changelog directory: {config.changelog.content_dir}")

    run_server(config)


def _load_config(config_path: Path | None) -> Config:
    """Load configuration, turning errors into CLI failures."""
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    cli()
