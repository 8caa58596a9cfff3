"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=3000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=True, description="Enable debug mode")

    # ======================
    # Protocol
    # ======================
    fee_bps: int = Field(
        default=10, ge=0, le=10_000, description="Mint/redeem/burn fee in basis points"
    )
    cluster: Literal["mainnet", "devnet"] = Field(
        default="mainnet", description="Default cluster for transaction descriptors"
    )
    enabled_stablecoins: str = Field(
        default="0", description="Comma-separated list of enabled stablecoin indices"
    )
    max_history_days: int = Field(
        default=365, ge=1, description="Upper bound for historical range queries"
    )

    # ======================
    # Rate / APY provider
    # ======================
    rate_provider: str = Field(default="memory", description="Rate provider: memory or http")
    rate_api_url: str = Field(
        default="https://api.reflect.money", description="Upstream rate API base URL"
    )
    rate_api_key: Optional[str] = Field(default=None, description="Upstream rate API key")
    provider_timeout_seconds: float = Field(
        default=5.0, gt=0, description="Timeout for a single provider query"
    )

    @property
    def stablecoin_indices(self) -> list[int]:
        """Parse enabled stablecoin indices into a list of integers."""
        if not self.enabled_stablecoins:
            return []
        return [
            int(index.strip())
            for index in self.enabled_stablecoins.split(",")
            if index.strip()
        ]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "protocol": {
                "fee_bps": self.fee_bps,
                "cluster": self.cluster,
                "stablecoins": self.stablecoin_indices,
                "max_history_days": self.max_history_days,
            },
            "provider": {
                "name": self.rate_provider,
                "url": self.rate_api_url,
                "api_key": "***" if self.rate_api_key else "(not set)",
                "timeout_seconds": self.provider_timeout_seconds,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
