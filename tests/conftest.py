"""
Test Configuration and Fixtures
===============================

Shared pytest fixtures and configuration for all tests.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests (may hit the network)")
    config.addinivalue_line("markers", "unit: marks tests as unit tests (no external dependencies)")


@pytest.fixture
def related_videos():
    """Records shaped like the scraper's output."""
    from youtube_related.schemas import RelatedVideo

    return [
        RelatedVideo(videoId="yPYZpwSpKmA", title="Together Forever", channel="Rick Astley", duration="3:25", views="180M views", published="14 years ago"),
        RelatedVideo(videoId="fJ9rUzIMcZQ", title="Bohemian Rhapsody", channel="Queen Official", duration="6:00"),
    ]


@pytest.fixture
def mock_scraper(related_videos):
    """Scraper stand-in whose ``scrape`` returns ``related_videos``."""
    scraper = MagicMock()
    scraper.scrape = AsyncMock(return_value=related_videos)
    return scraper


@pytest.fixture
def client(mock_scraper):
    """FastAPI test client with the scraper replaced by ``mock_scraper``."""
    from fastapi.testclient import TestClient

    from app import app
    from routes.dependencies import get_route_planner, get_scraper

    app.dependency_overrides[get_scraper] = lambda: mock_scraper
    app.dependency_overrides[get_route_planner] = lambda: None
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def clean_env(monkeypatch):
    """Clear the variables the service reads so defaults apply."""
    for name in ("PORT", "HOST", "IP_BLOCKS", "EXCLUDE_IP_ADDRESSES", "SCRAPER_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(Path(__file__).parent)
