"""CLI interface for docviewer.

Command-line tool for serving and exporting the documentation site.
"""

import asyncio
import logging
import sys
from pathlib import Path

import click

from docviewer.config import Config

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docviewer.toml)",
)
source_dir_option = click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)


@click.group()
def cli() -> None:
    """docviewer - browse design documents as a website."""


@cli.command()
@config_option
@source_dir_option
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
    source_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the documentation server."""
    from docviewer.server import run_server

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        source_dir=source_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")
    if not config.docs.allow_raw_html:
        click.echo("Raw HTML in documents: escaped")

    run_server(config)


@cli.command()
@config_option
@source_dir_option
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(path_type=Path, file_okay=False),
    default=Path("out"),
    show_default=True,
    help="Directory to write the static site to",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with an error if any declared document cannot be resolved",
)
@verbose_option
def build(
    config_path: Path | None,
    source_dir: Path | None,
    output_dir: Path,
    strict: bool,
    verbose: bool,
) -> None:
    """Export every document as a static HTML site."""
    from docviewer.export import export_site
    from docviewer.pages import PageBuilder
    from docviewer.server import create_resolver

    _configure_logging(verbose)
    config = _load_config(config_path).with_overrides(source_dir=source_dir)

    builder = PageBuilder(create_resolver(config), config.site)
    result = asyncio.run(export_site(builder, output_dir))

    click.echo(f"Wrote {len(result.written)} pages to {output_dir}")
    if result.missing:
        click.echo(
            click.style(
                f"Warning: {len(result.missing)} document(s) could not be resolved:",
                fg="yellow",
            ),
            err=True,
        )
        for category_id, file_id in result.missing:
            click.echo(f"  - {category_id}/{file_id}", err=True)
        if strict:
            sys.exit(1)


def _load_config(config_path: Path | None) -> Config:
    """Load configuration or exit with error."""
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    cli()
