"""Application configuration loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(";") if item.strip()]


class AppSettings(BaseSettings):
    """Runtime configuration, read once at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    ip_blocks: str | None = None
    exclude_ip_addresses: str | None = None

    scraper_timeout: int = 10000

    @property
    def ip_block_list(self) -> list[str]:
        return _split_list(self.ip_blocks)

    @property
    def excluded_ip_list(self) -> list[str]:
        return _split_list(self.exclude_ip_addresses)

    @property
    def has_route_planner(self) -> bool:
        return bool(self.ip_block_list)

    @property
    def scraper_timeout_set(self) -> bool:
        """True when SCRAPER_TIMEOUT came from the environment rather than the default."""
        return "scraper_timeout" in self.model_fields_set


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()
