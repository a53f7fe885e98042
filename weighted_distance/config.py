"""Environment-driven defaults for a DistanceEngine."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Default operation weights, read from WEIGHTED_DISTANCE_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="WEIGHTED_DISTANCE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Operation weights; validated by the engine setters, not here
    addition_cost: float = 1.0
    deletion_cost: float = 1.0
    substitution_cost: float = 1.0
    transposition_cost: float = 1.0

    log_level: str = "WARNING"
