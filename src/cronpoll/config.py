"""Configuration settings for cronpoll."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CRONPOLL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8080

    # Scheduler
    schedule_expression: str = "1/50 * * * * * *"  # seconds first
    scheduler_utc_offset: int = 0  # minutes east of UTC
    scheduler_job_defaults: dict = {
        "coalesce": True,
        "max_instances": 1,
        "misfire_grace_time": 30
    }
    poller_enabled: bool = True

    # Poll target
    poll_url: str = "https://httpbin.org/ip"
    http_timeout: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_file: str = ""


settings = Settings()
