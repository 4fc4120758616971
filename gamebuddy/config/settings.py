from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Required for seeding and admin scripts

    # App
    app_name: str = "gamebuddy-api"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    # Matching
    public_app_url: str = "http://localhost:5173"  # base of invite links
    discovery_max_distance_km: int = 50
    discovery_limit: int = 10
    default_sport: str = "tennis"
    allow_match_reset: Optional[bool] = None  # None -> enabled outside production

    # Change notifications (long poll)
    event_poll_interval_seconds: float = 2.0
    event_poll_timeout_seconds: float = 25.0

    # Reverse geocoding
    geocoding_url: str = "https://api.bigdatacloud.net/data/reverse-geocode-client"
    geocoding_timeout_seconds: float = 5.0

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def match_reset_enabled(self) -> bool:
        if self.allow_match_reset is None:
            return not self.is_production
        return self.allow_match_reset

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
