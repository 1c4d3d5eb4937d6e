"""Applecast - fetch podcast episode pages, metadata, and transcripts."""

__version__ = "0.1.0"
