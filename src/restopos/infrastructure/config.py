"""Application configuration and logging setup.

Settings come from environment variables prefixed ``POS_`` (or a
``.env`` file), e.g. ``POS_DATABASE_PATH=/var/lib/pos/db.json`` or
``POS_ENFORCE_TRANSITIONS=false``.

Usage:
    from restopos.infrastructure.config import get_settings, setup_logging

    settings = get_settings()
    setup_logging(settings)
"""

from __future__ import annotations

import logging
import sys
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the API server and the CLI.

    Attributes:
        database_path: JSON file backing the store; empty means the
            store lives in memory only and nothing is written to disk.
        tax_rate: Fraction of the subtotal charged as tax on bills.
        enforce_transitions: Reject kitchen status updates that skip or
            reverse a lifecycle step.  Disable for legacy terminals.
        kot_log_window: Default number of KOT entries served to viewers.
        kot_latency_budget_ms: Order-to-KOT latency above which a
            warning is logged.
        ws_queue_size: Frames buffered per realtime session before new
            frames are dropped for that session.
    """

    model_config = SettingsConfigDict(
        env_prefix="POS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # APPLICATION
    # ==========================================================================

    app_name: str = Field(default="Restaurant POS", description="Application display name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug logging")
    log_level: str = Field(default="INFO", description="Root log level")

    host: str = Field(default="0.0.0.0", description="API server host")
    port: int = Field(default=3000, description="API server port")
    cors_origins: str = Field(default="*", description="Comma-separated CORS origins")

    # ==========================================================================
    # STORE
    # ==========================================================================

    database_path: Optional[Path] = Field(
        default=Path("data/database.json"),
        description="JSON database file (empty for in-memory)",
    )

    # ==========================================================================
    # BUSINESS RULES
    # ==========================================================================

    tax_rate: Decimal = Field(default=Decimal("0.05"), description="Tax rate as decimal")
    enforce_transitions: bool = Field(default=True)
    kot_log_window: int = Field(default=100, gt=0)
    kot_latency_budget_ms: int = Field(default=300, gt=0)

    # ==========================================================================
    # REALTIME
    # ==========================================================================

    ws_queue_size: int = Field(default=100, gt=0)

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @field_validator("database_path", mode="before")
    @classmethod
    def validate_database_path(cls, v):
        if v is None or (isinstance(v, str) and v.strip() in ("", ":memory:")):
            return None
        return v

    @field_validator("tax_rate")
    @classmethod
    def validate_tax_rate(cls, v: Decimal) -> Decimal:
        if v < 0 or v >= 1:
            raise ValueError("tax_rate must be between 0 and 1")
        return v

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure application-wide logging.

    Returns:
        The package logger.
    """
    settings = settings or get_settings()

    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s │ %(levelname)-8s │ %(name)-32s │ %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logging.getLogger("restopos")
