"""Episode metadata extraction from podcast pages.

Extraction is an ordered list of independent attempts. Each attempt reads
the parsed page and returns whatever fields it can find; results are merged
per field with the first non-empty value winning. Structured JSON blocks come
first, loosely-typed ``<meta>`` markup after them, so markup only fills
fields the structured data left empty.
"""

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import Tag

from applecast.extraction.models import EpisodeMetadata
from applecast.extraction.text import clean_text

logger = logging.getLogger(__name__)

FIELDS = ("episode_title", "description", "show_title", "publish_date")

# Apple embeds schema.org data in these script elements
EPISODE_SCHEMA_ID = "schema:episode"
SHOW_SCHEMA_ID = "schema:show"

# (attribute, value) of a <meta> tag -> metadata field
META_FIELDS: dict[tuple[str, str], str] = {
    ("property", "og:title"): "episode_title",
    ("name", "apple:title"): "episode_title",
    ("itemprop", "name"): "episode_title",
    ("itemprop", "headline"): "episode_title",
    ("property", "og:description"): "description",
    ("name", "description"): "description",
    ("name", "apple:description"): "description",
    ("itemprop", "description"): "description",
    ("property", "og:site_name"): "show_title",
    ("itemprop", "publisher"): "show_title",
    ("itemprop", "datePublished"): "publish_date",
}

OG_DESCRIPTION_SEPARATOR = " · "

Fields = dict[str, str]
ExtractionAttempt = Callable[[BeautifulSoup], Fields]


def load_script_json(script: Tag) -> Any | None:
    """Parse the JSON body of a <script> element, or None if it isn't JSON."""
    text = script.string if script.string is not None else script.get_text()
    if not text or not text.strip():
        return None
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        logger.debug(f"Skipping unparseable JSON in script id={script.get('id')!r}")
        return None


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def fields_from_schema(data: Mapping[str, Any]) -> Fields:
    """Map a schema.org episode object onto metadata fields.

    Objects that already use the metadata field names are read as-is;
    schema.org names fill whatever those left empty.
    """
    fields: Fields = {name: _string(data.get(name)) for name in FIELDS}

    series = data.get("partOfSeries")
    series_name = _string(series.get("name")) if isinstance(series, Mapping) else ""

    schema_values = {
        "episode_title": _string(data.get("name")),
        "show_title": series_name,
        "publish_date": _string(data.get("datePublished")),
    }
    for name, value in schema_values.items():
        if not fields[name].strip():
            fields[name] = value

    return fields


def extract_from_episode_schema(soup: BeautifulSoup) -> Fields:
    """Read the ``schema:episode`` script block."""
    script = soup.find("script", id=EPISODE_SCHEMA_ID)
    if script is None:
        return {}

    data = load_script_json(script)
    if not isinstance(data, Mapping):
        return {}

    return fields_from_schema(data)


def _iter_json_ld_objects(data: Any) -> Iterable[Mapping[str, Any]]:
    if isinstance(data, list):
        for item in data:
            yield from _iter_json_ld_objects(item)
    elif isinstance(data, Mapping):
        yield data
        graph = data.get("@graph")
        if isinstance(graph, list):
            yield from _iter_json_ld_objects(graph)


def _is_episode(obj: Mapping[str, Any]) -> bool:
    kind = obj.get("@type")
    if isinstance(kind, list):
        return "PodcastEpisode" in kind
    return kind == "PodcastEpisode"


def extract_from_json_ld(soup: BeautifulSoup) -> Fields:
    """Read the first generic JSON-LD ``PodcastEpisode`` object on the page."""
    for script in soup.find_all("script", type="application/ld+json"):
        if script.get("id") in (EPISODE_SCHEMA_ID, SHOW_SCHEMA_ID):
            continue
        data = load_script_json(script)
        for obj in _iter_json_ld_objects(data):
            if _is_episode(obj):
                return fields_from_schema(obj)
    return {}


def extract_from_show_schema(soup: BeautifulSoup) -> Fields:
    """Read the show title from a show page's ``schema:show`` block."""
    script = soup.find("script", id=SHOW_SCHEMA_ID)
    if script is None:
        return {}

    data = load_script_json(script)
    if not isinstance(data, Mapping):
        return {}

    return {"show_title": _string(data.get("name"))}


def extract_from_meta_tags(soup: BeautifulSoup) -> Fields:
    """Collect fields from Open Graph, Apple, and microdata <meta> tags."""
    fields: Fields = {}

    for meta in soup.find_all("meta"):
        content = meta.get("content")
        if not isinstance(content, str) or not clean_text(content):
            continue

        for attr in ("property", "name", "itemprop"):
            key = meta.get(attr)
            if not isinstance(key, str):
                continue
            field = META_FIELDS.get((attr, key))
            if field and not fields.get(field):
                fields[field] = content
            break

    return fields


def extract_show_from_og_description(soup: BeautifulSoup) -> Fields:
    """Take the show name from ``Podcast Episode · Show · Date`` descriptions."""
    meta = soup.find("meta", attrs={"property": "og:description"})
    if meta is None:
        return {}

    content = meta.get("content")
    if not isinstance(content, str):
        return {}

    parts = content.split(OG_DESCRIPTION_SEPARATOR)
    if len(parts) < 2:
        return {}

    return {"show_title": parts[1]}


STRUCTURED_ATTEMPTS: tuple[ExtractionAttempt, ...] = (
    extract_from_episode_schema,
    extract_from_json_ld,
    extract_from_show_schema,
)

MARKUP_ATTEMPTS: tuple[ExtractionAttempt, ...] = (
    extract_from_meta_tags,
    extract_show_from_og_description,
)

DEFAULT_ATTEMPTS = STRUCTURED_ATTEMPTS + MARKUP_ATTEMPTS


def merge_fields(candidates: Iterable[Mapping[str, str]]) -> Fields:
    """Merge partial results; the first non-empty cleaned value wins per field."""
    merged: Fields = dict.fromkeys(FIELDS, "")

    for candidate in candidates:
        for name in FIELDS:
            if merged[name]:
                continue
            merged[name] = clean_text(candidate.get(name) or "")

    return merged


def extract_metadata(
    page_text: str,
    attempts: Iterable[ExtractionAttempt] = DEFAULT_ATTEMPTS,
) -> EpisodeMetadata:
    """Extract episode metadata from page HTML.

    Never raises: anything that cannot be found is left as an empty string.

    Args:
        page_text: Raw HTML of the episode or show page
        attempts: Ordered extraction attempts to merge

    Returns:
        EpisodeMetadata with all four fields present
    """
    try:
        soup = BeautifulSoup(page_text, "html.parser")
    except Exception as e:
        logger.warning(f"Could not parse page HTML: {e}")
        return EpisodeMetadata()

    results = []
    for attempt in attempts:
        fields = attempt(soup)
        if fields:
            logger.debug(f"{attempt.__name__} found: {sorted(k for k, v in fields.items() if v)}")
        results.append(fields)

    metadata = EpisodeMetadata(**merge_fields(results))
    if metadata.is_empty:
        logger.info("No metadata found in page")

    return metadata
