"""Locate a transcript (TTML) URL inside an episode page."""

import logging
import re
from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from applecast.extraction.metadata import load_script_json

logger = logging.getLogger(__name__)

TRANSCRIPT_EXTENSION = ".ttml"

# Script types that carry JSON data worth walking
JSON_SCRIPT_TYPES = ("application/json", "application/ld+json")

# Apple's key for the caption object that holds the transcript URL
CLOSED_CAPTIONS_KEY = "closedCaptions"

_RAW_TTML_URL_RE = re.compile(
    r"""https?://[^\s"'<>\\]+?\.ttml(?:\?[^\s"'<>\\]*)?(?=[\s"'<>\\]|$)""",
    re.IGNORECASE,
)


def is_transcript_url(value: str) -> bool:
    """Check whether a string is an http(s) URL pointing at a TTML file."""
    if not value.startswith(("http://", "https://")):
        return False
    return urlparse(value).path.lower().endswith(TRANSCRIPT_EXTENSION)


def _walk_json(value: Any) -> Iterator[str]:
    """Yield transcript URL candidates depth-first in document order."""
    if isinstance(value, Mapping):
        captions = value.get(CLOSED_CAPTIONS_KEY)
        if isinstance(captions, Mapping) and isinstance(captions.get("url"), str):
            yield captions["url"]
        for child in value.values():
            yield from _walk_json(child)
    elif isinstance(value, list):
        for child in value:
            yield from _walk_json(child)
    elif isinstance(value, str) and is_transcript_url(value):
        yield value


def find_in_script_data(page_text: str) -> str | None:
    """Search JSON script blobs for a transcript URL."""
    soup = BeautifulSoup(page_text, "html.parser")

    for script in soup.find_all("script"):
        script_type = (script.get("type") or "").lower()
        if script_type not in JSON_SCRIPT_TYPES:
            continue

        data = load_script_json(script)
        if data is None:
            continue

        for candidate in _walk_json(data):
            if candidate.strip():
                logger.debug(f"Transcript URL found in script id={script.get('id')!r}")
                return candidate.strip()

    return None


def find_in_raw_markup(page_text: str) -> str | None:
    """Scan the raw page text for any literal TTML URL."""
    match = _RAW_TTML_URL_RE.search(page_text)
    if match is None:
        return None

    logger.debug("Transcript URL found in raw markup")
    return match.group(0).replace("&amp;", "&")


def find_transcript_url(page_text: str) -> str | None:
    """Find the transcript URL referenced by an episode page.

    Embedded JSON data is searched first; if it yields nothing the raw
    markup is scanned. The first candidate wins.

    Args:
        page_text: Raw HTML of the episode page

    Returns:
        Transcript URL, or None if the page references none
    """
    url = find_in_script_data(page_text) or find_in_raw_markup(page_text)
    if url is None:
        logger.info("No transcript URL in page")
    return url
