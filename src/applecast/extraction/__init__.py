"""Metadata extraction from podcast pages."""

from applecast.extraction.metadata import extract_metadata
from applecast.extraction.models import EpisodeMetadata
from applecast.extraction.text import clean_text

__all__ = ["EpisodeMetadata", "clean_text", "extract_metadata"]
