import os

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # General
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Monitoring
    SENTRY_DSN: str | None = None
    PROMETHEUS_PORT: int = 8090
    METRICS_SERVER_ENABLED: bool = True

    model_config = SettingsConfigDict(
        env_file=os.environ.get("ENV_FILE", ".env"),
        extra="ignore",
    )


settings = Settings()
