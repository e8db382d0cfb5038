import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from dotenv import load_dotenv

load_dotenv()

# Cache sizing is fixed; not read from the environment.
CACHE_TTL_SECONDS: int = 5 * 60
CACHE_MAX_ENTRIES: int = 200

# Result-count bounds for a single lookup
MIN_LIMIT: int = 1
MAX_LIMIT: int = 10
DEFAULT_LIMIT: int = 7

MIN_QUERY_LENGTH: int = 2

SEARCH_RESULTS_PATH = "/Inquiry/CorporationSearch/SearchResults"
DETAIL_LINK_MARKER = "SearchResultDetail"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124 Safari/537.36"
)


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Registry
    sunbiz_base_url: str = os.getenv("SUNBIZ_BASE_URL", "https://search.sunbiz.org")
    sunbiz_user_agent: str = os.getenv("SUNBIZ_USER_AGENT", DEFAULT_USER_AGENT)

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if urlparse(self.sunbiz_base_url).scheme not in ("http", "https"):
            raise ValueError(
                f"SUNBIZ_BASE_URL must be an http(s) address, got {self.sunbiz_base_url!r}"
            )

        if not 0 < self.api_port < 65536:
            raise ValueError(f"API_PORT must be between 1 and 65535, got {self.api_port}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
