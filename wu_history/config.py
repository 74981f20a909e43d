from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    app_name: str = "wu-history"
    app_version: str = "0.1.0"
    app_env: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # Weather Underground (weather.com PWS) upstream
    wu_api_key: Optional[str] = None
    wu_base_url: str = "https://api.weather.com/v2/pws/history/all"
    wu_timeout_connect: float = 5.0
    wu_timeout_read: float = 15.0
    wu_max_retries: int = 0

    display_timezone: str = "Europe/Madrid"

    # Used by the CLI loader to reach a running proxy
    backend_url: str = "http://127.0.0.1:8000"

    # .env support and prefix for clarity
    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def api_key_configured(self) -> bool:
        return bool(self.wu_api_key and self.wu_api_key.strip())
