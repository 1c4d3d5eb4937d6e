"""HTTP fetching for pages and transcripts."""

from applecast.fetch.http import PageFetcher

__all__ = ["PageFetcher"]
