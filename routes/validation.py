"""Request validation utilities"""

from youtube_related.utils import extract_video_id, is_url, is_youtube_url

from .errors import ErrorMessage, create_http_error


def validate_query_url(url: str | None) -> str:
    """Validate the ``url`` query value and return its video identifier.

    Checks run in order; each one assumes the previous passed.
    """
    if not url:
        raise create_http_error(400, ErrorMessage.MISSING_URL)

    if not is_url(url):
        raise create_http_error(400, ErrorMessage.INVALID_URL)

    if not is_youtube_url(url):
        raise create_http_error(400, ErrorMessage.INVALID_YOUTUBE_URL)

    video_id = extract_video_id(url)
    if not video_id:
        raise create_http_error(400, ErrorMessage.INVALID_YOUTUBE_URL)

    return video_id
