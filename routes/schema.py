"""Response models for the API"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    error: str


class RelatedVideoResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    videoId: str
    url: str = Field(description="Short link, https://youtu.be/<videoId>")


class Uptime(BaseModel):
    seconds: float


class HealthResponse(BaseModel):
    health: str = "OK :3"
    uptime: Uptime


class RootResponse(BaseModel):
    path: str = "/query?url=youtube_url"
    health: str = "/health"
