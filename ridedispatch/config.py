"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Pricing
    base_fare: float = 20.0  # flat fare per trip
    surge_multiplier: float = 1.0  # > 1.0 wraps the flat fare in surge pricing

    # API
    rate_limit: str = "100/minute"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
