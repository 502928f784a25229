from typing import Optional, List, Dict, Any
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )

    # ===========================
    # Provider Customization
    # ===========================
    PROVIDER_NAME: Optional[str] = "RuTracker"

    # ===========================
    # Server Configuration
    # ===========================
    PORT: Optional[int] = 7000

    # ===========================
    # Source Configuration
    # ===========================
    TORAPI_URL: str = "https://torapi.vercel.app/api"
    TORAPI_SOURCE: str = "rutracker"

    # ===========================
    # Search Configuration
    # ===========================
    SEARCH_PAGE: int = 0
    SEARCH_MAX_RESULTS: int = 10
    ANIME_CATEGORY_MARKERS: List[str] = ["Аниме", "Онгоинги"]

    # ===========================
    # Latest Releases Configuration
    # ===========================
    LATEST_QUERY_TERM: str = "Аниме"
    LATEST_QUERY_YEAR: Optional[int] = None

    # ===========================
    # HTTP Configuration
    # ===========================
    HTTP_TIMEOUT: Optional[int] = 15
    PROXY_URL: Optional[str] = None

    # ===========================
    # Logging Configuration
    # ===========================
    LOG_LEVEL: Optional[str] = "INFO"

    # ===========================
    # Field Validators
    # ===========================
    @field_validator("TORAPI_URL", "PROXY_URL")
    @classmethod
    def normalize_urls(cls, v):
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    @field_validator("TORAPI_SOURCE")
    @classmethod
    def normalize_source(cls, v):
        if isinstance(v, str):
            return v.strip().strip("/").lower()
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    # ===========================
    # Computed Properties
    # ===========================
    @computed_field
    @property
    def PROVIDER_SETTINGS(self) -> Dict[str, Any]:
        return {
            "canSmartSearch": True,
            "smartSearchFilters": ["batch", "episodeNumber", "resolution", "query"],
            "supportsAdult": False,
            "type": "main"
        }


# ===========================
# Settings Instance
# ===========================
settings = Settings()
