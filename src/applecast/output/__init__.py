"""Artifact output for acquisition runs."""

from applecast.output.manager import (
    METADATA_FILENAME,
    PAGE_FILENAME,
    TRANSCRIPT_FILENAME,
    OutputManager,
)

__all__ = ["OutputManager", "PAGE_FILENAME", "METADATA_FILENAME", "TRANSCRIPT_FILENAME"]
