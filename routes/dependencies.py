"""FastAPI dependencies exposing the objects built at startup."""

from fastapi import Request

from youtube_related.route_planner import RoutePlanner
from youtube_related.scraper import Scraper


def get_scraper(request: Request) -> Scraper:
    return request.app.state.scraper


def get_route_planner(request: Request) -> RoutePlanner | None:
    return getattr(request.app.state, "route_planner", None)
