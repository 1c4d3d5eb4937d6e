"""CLI entry point for Applecast."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from applecast.config.logging import setup_logging
from applecast.config.manager import load_config
from applecast.pipeline import AcquisitionResult, PipelineOrchestrator
from applecast.ui import get_theme
from applecast.utils.errors import ConfigError, FetchError, InvalidInputError
from applecast.utils.urls import validate_url

app = typer.Typer(
    name="applecast",
    help="Fetch and process Apple Podcasts episodes and shows",
    add_completion=False,
)
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        from applecast import __version__

        console.print(f"[bold cyan]Applecast CLI[/bold cyan] v{__version__}")
        raise typer.Exit()


def _fail(message: str) -> NoReturn:
    err_console.print(get_theme().error_text(escape(message)), soft_wrap=True)
    sys.exit(1)


def render_result(result: AcquisitionResult) -> None:
    """Print the status lines for a completed run."""
    theme = get_theme()

    console.print(theme.success_text("Fetched HTML content."), soft_wrap=True)
    if result.page_error:
        err_console.print(
            theme.warning_text(f"Failed to save page: {escape(result.page_error)}"),
            soft_wrap=True,
        )

    if result.metadata_path is not None:
        path = theme.path_text(escape(str(result.metadata_path)))
        console.print(theme.success_text(f"Metadata extracted and saved to {path}"), soft_wrap=True)
    else:
        err_console.print(
            theme.warning_text(f"Failed to save metadata: {escape(result.metadata_error or '')}"),
            soft_wrap=True,
        )

    if not result.transcript_found:
        console.print(theme.warning_text("No transcript found for this episode."), soft_wrap=True)
    elif result.transcript_path is not None:
        path = theme.path_text(escape(str(result.transcript_path)))
        console.print(
            theme.success_text(f"Transcript downloaded and saved to {path}"), soft_wrap=True
        )
    else:
        err_console.print(
            theme.warning_text(
                f"Failed to download transcript: {escape(result.transcript_error or '')}"
            ),
            soft_wrap=True,
        )


@app.command()
def main(
    url: str = typer.Argument(
        ..., metavar="URL", help="Apple Podcasts episode or show URL"
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", help="Directory for episode.html, metadata.json and transcript.ttml [default: output]"
    ),
    config_file: Path | None = typer.Option(
        None, "--config", "-c", help="YAML configuration file"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
) -> None:
    """Fetch an episode page, extract its metadata, and download its transcript.

    Examples:
        applecast "https://podcasts.apple.com/us/podcast/id840986946?i=1000631244436"

        applecast https://podcasts.apple.com/us/podcast/id840986946 -o ./fish
    """
    try:
        url = validate_url(url)
    except InvalidInputError as e:
        _fail(str(e))

    try:
        config = load_config(config_file, output_dir=output_dir)
    except ConfigError as e:
        _fail(str(e))

    setup_logging(verbose=verbose, log_file=log_file, level=config.log_level)

    console.print(get_theme().received_text(escape(url)), soft_wrap=True)

    try:
        result = PipelineOrchestrator(config).run(url)
    except FetchError as e:
        logger.debug(f"Page fetch failed for {url}", exc_info=True)
        _fail(str(e))

    render_result(result)


if __name__ == "__main__":
    app()
