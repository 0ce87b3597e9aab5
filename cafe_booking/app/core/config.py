from pydantic import ConfigDict
from pydantic_settings import BaseSettings

UNCONFIGURED_ENDPOINT = "YOUR_APPS_SCRIPT_URL_HERE"


class Settings(BaseSettings):
    """Application settings sourced from environment variables."""

    # Google Apps Script web app, e.g. https://script.google.com/macros/s/<DEPLOYMENT_ID>/exec
    APPS_SCRIPT_URL: str = UNCONFIGURED_ENDPOINT
    API_PREFIX: str = "/api/v1"
    CAFE_NAME: str = "Hyunju Cafe"

    DRY_RUN_DELAY_SECONDS: float = 1.0
    SUCCESS_MESSAGE_TTL_SECONDS: float = 5.0
    REQUEST_TIMEOUT_SECONDS: float = 10.0

    BOOKING_WINDOW_MONTHS: int = 3
    TIME_SLOTS: list[str] = ["11:00", "12:00", "13:00", "14:00", "15:00", "16:00", "17:00"]
    MAX_PARTY_SIZE: int = 10
    TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(env_file=".env", extra="ignore")

    @property
    def dry_run(self) -> bool:
        """True when no real endpoint is configured."""
        url = self.APPS_SCRIPT_URL.strip()
        return not url or url == UNCONFIGURED_ENDPOINT


settings = Settings()


def get_settings() -> Settings:
    return settings
