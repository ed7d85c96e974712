"""YouTube Related Videos FastAPI Application"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from log_config import setup_logging
from routes import api_router
from routes.errors import http_exception_handler
from youtube_related.bootstrap import build_route_planner, build_scraper
from youtube_related.settings import get_settings

load_dotenv()
setup_logging(get_settings().log_level)

API_VERSION = "1.0.0"
API_TITLE = "YouTube Related Videos API"
API_DESCRIPTION = "Related videos for any YouTube URL"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    app.state.started_at = time.monotonic()
    app.state.route_planner = build_route_planner(settings)
    app.state.scraper = build_scraper(settings)
    yield


app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    docs_url="/docs",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.include_router(api_router)


@app.middleware("http")
async def log_requests(request, call_next):
    start_time = datetime.now()
    response = await call_next(request)
    process_time = (datetime.now() - start_time).total_seconds()
    logging.info(f"📨 {request.method} {request.url.path} - {response.status_code} ({process_time:.3f}s)")
    return response


def main():
    import uvicorn

    settings = get_settings()

    logging.info(f"🚀 Starting {API_TITLE} v{API_VERSION} on {settings.host}:{settings.port}")
    # uvicorn exits with status 1 when the port cannot be bound
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
