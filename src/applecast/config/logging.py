"""Logging setup for the CLI."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str = "WARNING",
) -> None:
    """Configure the ``applecast`` logger.

    Console output goes through rich on stderr so it never mixes with the
    status lines scripts read from stdout.

    Args:
        verbose: Force DEBUG level
        log_file: Optional file that also receives plain-text log records
        level: Level name used when not verbose
    """
    root = logging.getLogger("applecast")
    root.setLevel(logging.DEBUG if verbose else getattr(logging, level, logging.WARNING))

    # Re-running inside one process (tests) must not stack handlers
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    root.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    root.propagate = False
