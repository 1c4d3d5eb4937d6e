"""Transcript discovery for episode pages."""

from applecast.transcript.locator import find_transcript_url, is_transcript_url

__all__ = ["find_transcript_url", "is_transcript_url"]
