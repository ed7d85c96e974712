"""URL validation and YouTube identifier extraction."""

import re
from urllib.parse import parse_qs

from pydantic import AnyUrl, TypeAdapter, ValidationError

YOUTUBE_URL_PATTERN = re.compile(r"(https?://)?((www\.)?youtube\.com|youtu\.?be)/.+")
SHORT_URL_PREFIX = "https://youtu.be/"

_url_adapter = TypeAdapter(AnyUrl)


def is_url(value: str) -> bool:
    """Check whether a string parses as an absolute URL.

    Args:
        value: Free-form string, usually straight from the query string

    Returns:
        True if the string is a well-formed URL, False otherwise
    """
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def is_youtube_url(url: str) -> bool:
    """Check if a URL looks like a YouTube video link.

    Only the shape is checked; a match does not guarantee a playable video.
    """
    return YOUTUBE_URL_PATTERN.fullmatch(url) is not None


def extract_video_id(url: str) -> str:
    """Extract the video identifier from a YouTube URL.

    Args:
        url: A URL that already passed ``is_url``

    Returns:
        The identifier, or an empty string when none can be found
    """
    try:
        parsed = _url_adapter.validate_python(url)
    except ValidationError:
        return ""
    hostname = parsed.host or ""

    if hostname == "youtu.be":
        return (parsed.path or "")[1:]
    if hostname in ("www.youtube.com", "youtube.com"):
        # the first `v` wins even when it is blank
        values = parse_qs(parsed.query or "", keep_blank_values=True).get("v")
        return values[0] if values else ""
    return ""


def short_url(video_id: str) -> str:
    return f"{SHORT_URL_PREFIX}{video_id}"
