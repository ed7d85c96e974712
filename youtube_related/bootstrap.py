"""Build the long-lived service objects from settings."""

import logging

from .route_planner import RoutePlanner
from .scraper import Scraper
from .settings import AppSettings

logger = logging.getLogger(__name__)


def build_route_planner(settings: AppSettings) -> RoutePlanner | None:
    if not settings.has_route_planner:
        if settings.excluded_ip_list:
            logger.warning("EXCLUDE_IP_ADDRESSES is set but IP_BLOCKS is not set. Route planner will not be used.")
        return None

    ip_blocks = settings.ip_block_list
    route_planner = RoutePlanner(
        ip_blocks,
        exclude_ips=settings.excluded_ip_list or None,
        log=logging.getLogger("youtube_related.route_planner"),
    )
    logger.info(f"Route planner is enabled. {len(ip_blocks)} IP blocks are loaded.")
    return route_planner


def build_scraper(settings: AppSettings) -> Scraper:
    scraper = Scraper(timeout=settings.scraper_timeout, log=logging.getLogger("youtube_related.scraper"))
    if settings.scraper_timeout_set:
        logger.info(f"Scraper timeout is set to {settings.scraper_timeout}ms.")
    return scraper
