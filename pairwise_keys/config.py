"""
Pairwise Key Configuration

Environment-based configuration for pairwise key derivation.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Derivation settings from PAIRWISE_* environment variables."""

    # RSA
    default_modulus_bits: int = Field(
        default=1024,
        description="RSA modulus length used when the algorithm does not name one"
    )

    min_modulus_bits: int = Field(
        default=512,
        description="Smallest RSA modulus length accepted"
    )

    # Prime search
    mr_rounds: int = Field(
        default=64,
        ge=64,
        description="Miller-Rabin rounds per prime candidate"
    )

    max_prime_attempts: int = Field(
        default=100_000,
        description="Candidates examined before the prime search gives up"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )

    log_format: str = Field(
        default="json",
        description="Log format: json or text"
    )

    # Application
    app_version: str = Field(default="0.1.0")

    model_config = SettingsConfigDict(
        env_prefix="PAIRWISE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get derivation settings."""
    return settings
