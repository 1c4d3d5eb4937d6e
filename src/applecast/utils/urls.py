"""URL validation performed before any network access."""

from pydantic import HttpUrl, TypeAdapter, ValidationError

from applecast.utils.errors import InvalidInputError

_HTTP_URL = TypeAdapter(HttpUrl)


def validate_url(url: str) -> str:
    """Check that a string is an absolute http(s) URL.

    Args:
        url: URL as given on the command line

    Returns:
        The URL with surrounding whitespace removed

    Raises:
        InvalidInputError: If the URL is not a valid http(s) URL
    """
    candidate = url.strip()
    if not candidate:
        raise InvalidInputError(f"Invalid URL format: '{url}'")

    try:
        _HTTP_URL.validate_python(candidate)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid URL format: '{url}'") from e

    return candidate
