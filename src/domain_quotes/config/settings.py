# src/domain_quotes/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration for the default pricing bundle and the CLI
using Pydantic Settings. Values come from environment variables or a .env file.

The quote engine itself never reads these settings; it is always handed an
explicit DomainQuoteConfig. Only application.defaults and the CLI use them.

Files that USE this module:
- domain_quotes.application.defaults (VAT rate, currency allow-list, data sources)
- domain_quotes.adapters.providers.remote (URLs and HTTP timeout)
- domain_quotes.shared.logging_conf (console logging switch)
- domain_quotes.app (log destinations, rounding default)

Files that this module USES:
- None (pydantic / pydantic-settings only)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import json  # JSON-list form of the currency allow-list
from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

_DATA_BASE_URL = "https://raw.githubusercontent.com/namewiz/registrar-pricelist/refs/heads/main/data"


def _split_codes(raw: str) -> list[str]:
    """Split "usd, ngn" or a JSON list such as '["usd", "ngn"]' into uppercase codes."""
    text = raw.strip()
    if text.startswith("["):
        try:
            items = json.loads(text)
        except ValueError:
            items = None
        if isinstance(items, list):
            return [str(code).strip().upper() for code in items if str(code).strip()]
    return [code.strip().upper() for code in raw.split(",") if code.strip()]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Pricing policy ---
    vat_rate: float = Field(default=0.075, alias="DOMAIN_QUOTES_VAT_RATE", ge=0.0, le=1.0)
    supported_currencies_raw: str = Field(default="USD,NGN", alias="DOMAIN_QUOTES_SUPPORTED_CURRENCIES")
    allow_fractional_amounts: bool = Field(default=False, alias="DOMAIN_QUOTES_ALLOW_FRACTIONAL")

    # --- Data sources ---
    create_prices_url: str = Field(
        default=f"{_DATA_BASE_URL}/unified-create-prices.csv", alias="DOMAIN_QUOTES_CREATE_PRICES_URL"
    )
    renew_prices_url: str = Field(
        default=f"{_DATA_BASE_URL}/unified-renew-prices.csv", alias="DOMAIN_QUOTES_RENEW_PRICES_URL"
    )
    transfer_prices_url: str = Field(
        default=f"{_DATA_BASE_URL}/unified-transfer-prices.csv", alias="DOMAIN_QUOTES_TRANSFER_PRICES_URL"
    )
    # No public restore price list exists yet; restore falls back to create prices.
    restore_prices_url: str = Field(default="", alias="DOMAIN_QUOTES_RESTORE_PRICES_URL")
    exchange_rates_url: str = Field(
        default=f"{_DATA_BASE_URL}/exchange-rates.json", alias="DOMAIN_QUOTES_EXCHANGE_RATES_URL"
    )
    data_dir: Optional[Path] = Field(default=None, alias="DOMAIN_QUOTES_DATA_DIR")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="DOMAIN_QUOTES_LOG_STDOUT")

    @property
    def supported_currencies(self) -> list[str]:
        """Currency allow-list as uppercase codes."""
        return _split_codes(self.supported_currencies_raw)

    @field_validator("supported_currencies_raw", mode="before")
    @classmethod
    def join_currency_list(cls, v):
        """Accept a list of codes as well as a comma-separated string."""
        if isinstance(v, (list, tuple)):
            return ",".join(str(code) for code in v)
        return v

    @field_validator("supported_currencies_raw")
    @classmethod
    def validate_supported_currencies(cls, v: str) -> str:
        """Require at least one currency code and normalize to "USD,NGN" form."""
        codes = _split_codes(v)
        if not codes:
            raise ValueError("DOMAIN_QUOTES_SUPPORTED_CURRENCIES must list at least one currency")
        return ",".join(codes)


# Global settings instance
settings = Settings()
