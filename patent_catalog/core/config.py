"""Application configuration via environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LINKS_URL = (
    "https://raw.githubusercontent.com/threndash/patent-download-ui/refs/heads/main/links.json"
)

DEFAULT_ESSENTIAL_IDENTIFIERS = [
    "g_assignee_disambiguated",
    "g_inventor_disambiguated",
    "g_cpc_at_issue",
    "g_location_disambiguated",
    "g_us_patent_citation",
    "g_application",
    "g_patent",
    "pg_assignee_disambiguated",
    "pg_inventor_disambiguated",
    "pg_cpc_at_issue",
    "pg_location_disambiguated",
    "pg_published_application",
]


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = Field("Patent Dataset Catalog", description="Human-readable service name.")
    environment: str = Field("dev", description="Deployment environment tag.")
    debug: bool = Field(False, description="Enable FastAPI debug mode.")
    log_level: str = Field("INFO", description="Root logging level used by scripts.")

    api_v1_prefix: str = Field("/api", description="Root prefix for versioned API routes.")
    frontend_origin: Optional[HttpUrl] = Field(
        None, description="Optional frontend origin allowed for CORS policies."
    )

    links_path: Optional[Path] = Field(
        None, description="Local links.json consulted before the remote catalog."
    )
    links_url: str = Field(
        DEFAULT_LINKS_URL, description="Remote links.json listing the downloadable datasets."
    )
    request_timeout: float = Field(30.0, description="HTTP timeout in seconds for the catalog fetch.")

    essential_identifiers: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ESSENTIAL_IDENTIFIERS),
        description="Dataset identifiers surfaced in the Essentials overlay.",
    )

    allowed_hosts: List[str] = Field(
        default_factory=lambda: ["*"], description="Hosts allowed to access the service."
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache()
def get_settings() -> Settings:
    """Provide a cached Settings instance."""

    return Settings()
