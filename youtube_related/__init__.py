"""Top-level package exports for the related videos service."""

from .bootstrap import build_route_planner, build_scraper
from .route_planner import RoutePlanner, RoutePlannerError
from .schemas import LogSink, RelatedVideo
from .scraper import Scraper
from .settings import AppSettings, get_settings
from .utils import extract_video_id, is_url, is_youtube_url, short_url

__all__ = [
    "AppSettings",
    "LogSink",
    "RelatedVideo",
    "RoutePlanner",
    "RoutePlannerError",
    "Scraper",
    "build_route_planner",
    "build_scraper",
    "extract_video_id",
    "get_settings",
    "is_url",
    "is_youtube_url",
    "short_url",
]
