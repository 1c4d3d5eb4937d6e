"""Shared fixtures for Applecast tests."""

import io
import json
from collections.abc import Callable

import pytest
import requests

EPISODE_URL = "https://podcasts.apple.com/us/podcast/id840986946?i=1000631244436"
TRANSCRIPT_URL = "https://example.com/transcript.ttml"

TTML_DOCUMENT = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<tt xmlns="http://www.w3.org/ns/ttml"><body><div>'
    '<p begin="0s" end="2s">Welcome to the show.</p>'
    "</div></body></tt>"
)


def make_response(
    body: str = "",
    status_code: int = 200,
    url: str = EPISODE_URL,
    content_type: str = "text/html; charset=utf-8",
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.reason = "OK" if status_code < 400 else "Not Found"
    response.headers["Content-Type"] = content_type
    response._content = body.encode("utf-8")
    response.raw = io.BytesIO(response._content)
    return response


@pytest.fixture
def response_factory() -> Callable[..., requests.Response]:
    """Factory for fake HTTP responses."""
    return make_response


@pytest.fixture
def schema_episode_html() -> str:
    """Episode page with an Apple schema:episode block and meta tags."""
    schema = {
        "@context": "http://schema.org",
        "@type": "PodcastEpisode",
        "name": "Why Octopuses Hate the Moon",
        "description": "<p>In this   episode...\n the elves talk moons.</p>",
        "datePublished": "2023-11-25",
        "partOfSeries": {"@type": "CreativeWorkSeries", "name": "No Such Thing As A Fish"},
    }
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta property="og:title" content="Octopus Episode (Open Graph)">
  <meta property="og:description" content="Podcast Episode · No Such Thing As A Fish · 25/11/2023">
  <meta property="og:site_name" content="Apple Podcasts">
  <script id="schema:episode" type="application/ld+json">{json.dumps(schema)}</script>
</head>
<body><h1>Why Octopuses Hate the Moon</h1></body>
</html>"""


@pytest.fixture
def meta_only_html() -> str:
    """Episode page with only fallback <meta> markup."""
    return """<html>
<head>
  <meta name="apple:title" content="  Fallback   Title ">
  <meta name="description" content="A <b>fallback</b> description.">
  <meta itemprop="publisher" content="Fallback Show">
  <meta itemprop="datePublished" content="Nov 25, 2023">
</head>
<body></body>
</html>"""


@pytest.fixture
def transcript_page_html() -> str:
    """Episode page whose serialized server data references a transcript."""
    data = [
        {
            "data": {
                "shelves": [
                    {
                        "items": [
                            {
                                "contextAction": {
                                    "episodeOffer": {
                                        "closedCaptions": {"url": TRANSCRIPT_URL}
                                    }
                                }
                            }
                        ]
                    }
                ]
            }
        }
    ]
    return (
        "<html><body>"
        '<script type="application/json" id="serialized-server-data">'
        f"{json.dumps(data)}"
        "</script></body></html>"
    )


@pytest.fixture
def episode_url() -> str:
    return EPISODE_URL


@pytest.fixture
def transcript_url() -> str:
    return TRANSCRIPT_URL


@pytest.fixture
def ttml_document() -> str:
    return TTML_DOCUMENT
