"""Text normalization for values pulled out of HTML."""

import re

_TAG_RE = re.compile(r"<[^>]*>")


def clean_text(raw: str) -> str:
    """Strip markup tags and collapse whitespace.

    Tags are removed repeatedly until none remain, so fragments such as
    ``<<b>i>`` cannot reassemble into a tag. Entities are left untouched.

    Args:
        raw: Text that may contain markup

    Returns:
        Single-line text with no tags and single spaces

    Example:
        >>> clean_text("<p>In this   episode...</p>\\n")
        'In this episode...'
    """
    text = raw
    while True:
        stripped = _TAG_RE.sub("", text)
        if stripped == text:
            break
        text = stripped

    return " ".join(text.split())
