"""Tests for URL validation and identifier extraction."""

import pytest

from youtube_related.utils import extract_video_id, is_url, is_youtube_url, short_url


@pytest.mark.unit
class TestIsUrl:
    @pytest.mark.parametrize(
        "value",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "http://youtu.be/dQw4w9WgXcQ",
            "ftp://files.example.com/a.txt",
            "https://example.com:8443/path?q=1#frag",
        ],
    )
    def test_accepts_absolute_urls(self, value):
        assert is_url(value) is True

    @pytest.mark.parametrize("value", ["", "   ", "not-a-url", "youtu.be/dQw4w9WgXcQ", "https://", "http://example.com:99999/"])
    def test_rejects_malformed(self, value):
        assert is_url(value) is False


@pytest.mark.unit
class TestIsYoutubeUrl:
    @pytest.mark.parametrize(
        "value",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtube.com/watch?v=dQw4w9WgXcQ",
            "http://youtu.be/dQw4w9WgXcQ",
            "youtu.be/dQw4w9WgXcQ",
            "https://youtube/dQw4w9WgXcQ",
        ],
    )
    def test_matches_youtube_shapes(self, value):
        assert is_youtube_url(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "https://youtu.be/",
            "https://www.youtube.com",
            "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://example.com/youtu.be/dQw4w9WgXcQ",
            "ftp://youtu.be/dQw4w9WgXcQ",
        ],
    )
    def test_rejects_other_shapes(self, value):
        assert is_youtube_url(value) is False


@pytest.mark.unit
class TestExtractVideoId:
    def test_short_link(self):
        assert extract_video_id("https://youtu.be/abc123") == "abc123"

    def test_short_link_keeps_rest_of_path(self):
        assert extract_video_id("https://youtu.be/abc123/extra?t=4") == "abc123/extra"

    def test_watch_link(self):
        assert extract_video_id("https://www.youtube.com/watch?v=abc123&t=5") == "abc123"

    def test_short_link_path_is_percent_encoded(self):
        assert extract_video_id("https://youtu.be/a b") == "a%20b"

    def test_watch_link_without_www(self):
        assert extract_video_id("https://youtube.com/watch?v=abc123") == "abc123"

    def test_first_v_value_wins(self):
        assert extract_video_id("https://www.youtube.com/watch?v=first&v=second") == "first"

    @pytest.mark.parametrize(
        "value",
        [
            "https://www.youtube.com/watch",
            "https://www.youtube.com/watch?v=",
            "https://www.youtube.com/watch?v=&v=abc123",
            "https://youtube/abc123",
            "https://example.com/watch?v=abc123",
        ],
    )
    def test_not_found_returns_empty(self, value):
        assert extract_video_id(value) == ""


@pytest.mark.unit
def test_short_url():
    assert short_url("abc123") == "https://youtu.be/abc123"
