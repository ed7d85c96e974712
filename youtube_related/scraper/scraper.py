"""Related-video scraper backed by YouTube's internal ``next`` endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..route_planner import RoutePlanner
from ..schemas import LogSink, RelatedVideo
from .parsing import parse_related_videos

YOUTUBEI_NEXT_ENDPOINT = "https://www.youtube.com/youtubei/v1/next"
YOUTUBE_WEB_CLIENT_NAME = "WEB"
YOUTUBE_WEB_CLIENT_VERSION = "2.20251125.06.00"
DEFAULT_TIMEOUT_MS = 10000
DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    "Accept": "application/json",
    "Accept-Language": "en-US,en;q=0.9",
    "Origin": "https://www.youtube.com",
}


class Scraper:
    """Fetch the related videos of a YouTube video.

    Configuration is fixed at construction. Each ``scrape`` call opens its own
    client, so one instance can serve concurrent requests.

    Args:
        timeout: Request timeout in milliseconds
        log: Sink for debug/info messages, defaults to this module's logger
        transport: Optional httpx transport, used in place of the network
    """

    def __init__(self, timeout: int = DEFAULT_TIMEOUT_MS, log: LogSink | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = timeout
        self.log = log or logging.getLogger(__name__)
        self._transport = transport

    def _build_payload(self, video_id: str) -> dict[str, Any]:
        return {
            "context": {
                "client": {
                    "clientName": YOUTUBE_WEB_CLIENT_NAME,
                    "clientVersion": YOUTUBE_WEB_CLIENT_VERSION,
                    "hl": "en",
                    "gl": "US",
                    "utcOffsetMinutes": 0,
                }
            },
            "videoId": video_id,
            "contentCheckOk": True,
            "racyCheckOk": True,
        }

    def _build_transport(self, route_planner: RoutePlanner | None) -> httpx.AsyncBaseTransport | None:
        local_address = route_planner.next_address() if route_planner else None
        if self._transport is not None:
            return self._transport
        if local_address:
            return httpx.AsyncHTTPTransport(local_address=local_address)
        return None

    async def scrape(self, video_id: str, route_planner: RoutePlanner | None = None) -> list[RelatedVideo] | None:
        """Scrape related videos for ``video_id``.

        Returns:
            The related videos, or None when YouTube lists none

        Raises:
            httpx.HTTPError: On timeouts, connection failures and non-2xx responses
        """
        self.log.debug(f"Scraping related videos for {video_id}")

        transport = self._build_transport(route_planner)
        async with httpx.AsyncClient(timeout=self.timeout / 1000, transport=transport, headers=DEFAULT_HEADERS) as client:
            response = await client.post(YOUTUBEI_NEXT_ENDPOINT, params={"prettyPrint": "false"}, json=self._build_payload(video_id))
        response.raise_for_status()

        videos = parse_related_videos(response.json(), video_id)
        self.log.info(f"Found {len(videos)} related videos for {video_id}")
        return videos or None
