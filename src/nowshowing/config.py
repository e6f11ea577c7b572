"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from nowshowing.utils.text import slugify


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Cinema
    cinema_name: str = "Vue Nottingham"
    cinema_url: str = "https://www.myvue.com/cinema/nottingham/whats-on"
    timezone: str = "Europe/London"

    # Acquisition: "browser", "http" or "serpapi"
    source_mode: str = "browser"

    # Scraping settings
    scrape_timeout: int = 30
    scrape_max_retries: int = 3
    page_settle_ms: int = 3000
    consent_selectors: list[str] = [
        "#onetrust-accept-btn-handler",
        "button:has-text('Accept all')",
        "button:has-text('Accept')",
    ]

    # SerpAPI (Google showtimes)
    serpapi_api_key: str = ""
    serpapi_query: str = "Vue Nottingham showtimes"
    serpapi_location: str = "Nottingham, England, United Kingdom"

    # Extraction
    card_selectors: list[str] = [
        "[data-film]",
        "article",
        ".film-card",
        ".film",
        ".movie",
        "li.film-item",
    ]

    # Snapshot
    default_duration_minutes: int = 120
    include_today_block: bool = True
    output_dir: str = "public"
    output_filename: str = ""

    # Scheduled refresh / API settings
    refresh_minutes: int = 15
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    @property
    def output_path(self) -> str:
        """Where the snapshot file is published, e.g. ``public/vue-nottingham.json``."""
        filename = self.output_filename or f"{slugify(self.cinema_name)}.json"
        return f"{self.output_dir.rstrip('/')}/{filename}"


# Global settings instance
settings = Settings()
