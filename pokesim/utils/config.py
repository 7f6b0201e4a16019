"""Configuration management for PokeSim."""

import os

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Application configuration."""

    # Battle settings
    default_max_rounds: int = 5
    random_factor_min: int = 85  # Damage roll, percent of base damage
    random_factor_max: int = 100

    # Server settings
    host: str = "0.0.0.0"
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "8080")))
    cors_allow_origins: list[str] = ["*"]

    # Logging
    log_level: str = Field(default_factory=lambda: os.getenv("POKESIM_LOG_LEVEL", "INFO"))


# Global config instance
config = Config()
