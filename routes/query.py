"""Related videos endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from youtube_related.route_planner import RoutePlanner
from youtube_related.scraper import Scraper

from .dependencies import get_route_planner, get_scraper
from .errors import ErrorMessage, create_http_error, handle_exception
from .helpers import with_short_url
from .schema import ErrorResponse, RelatedVideoResponse
from .validation import validate_query_url

router = APIRouter()


@router.get(
    "/query",
    responses={
        200: {"model": list[RelatedVideoResponse]},
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def query_related_videos(
    url: Annotated[str | None, Query(description="YouTube video URL")] = None,
    scraper: Scraper = Depends(get_scraper),
    route_planner: RoutePlanner | None = Depends(get_route_planner),
):
    video_id = validate_query_url(url)

    try:
        result = await scraper.scrape(video_id, route_planner)
        records = with_short_url(result) if result else None
    except Exception as e:
        raise handle_exception(e) from e

    if not records:
        raise create_http_error(404, ErrorMessage.NOT_FOUND)

    return records
