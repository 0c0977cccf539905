"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_level: str = "INFO"

    # Validation
    enforce_coordinate_ranges: bool = False  # reject |lat| > 90, |lon| > 180

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
