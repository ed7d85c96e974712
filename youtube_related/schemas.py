"""Data models shared by the scraper and the API layer."""

from typing import Protocol

from pydantic import BaseModel, ConfigDict


class LogSink(Protocol):
    """Minimal logging capability accepted by the scraper and route planner.

    ``logging.Logger`` satisfies it, as does any object with these two methods.
    """

    def debug(self, msg: str) -> None: ...

    def info(self, msg: str) -> None: ...


class RelatedVideo(BaseModel):
    model_config = ConfigDict(extra="allow")

    videoId: str
    title: str | None = None
    channel: str | None = None
    duration: str | None = None
    views: str | None = None
    published: str | None = None
    thumbnail: str | None = None
