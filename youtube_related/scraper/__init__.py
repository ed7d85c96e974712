"""Scraper package exports."""

from .parsing import parse_related_videos
from .scraper import Scraper

__all__ = [
    "Scraper",
    "parse_related_videos",
]
