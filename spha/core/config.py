"""
Application settings management.

Settings are loaded from environment variables with .env file support.
All configuration is validated using Pydantic.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_TECHNICAL_LAG_TYPE_IDS = [
    "TECHNICAL_LAG_DEV_DIRECT_COMPONENT",
    "TECHNICAL_LAG_PROD_DIRECT_COMPONENT",
    "TECHNICAL_LAG_DEV_TRANSITIVE_COMPONENT",
    "TECHNICAL_LAG_PROD_TRANSITIVE_COMPONENT",
]


class Settings(BaseSettings):
    """
    Application settings loaded from environment.

    Environment variables take precedence over .env file values.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # ==========================================================================
    # Calculation
    # ==========================================================================

    strict_mode: bool = Field(
        default=False,
        description="Default strictness for structural checks during calculation",
    )
    validate_before_calculation: bool = Field(
        default=False,
        description="Run the hierarchy validator before each calculation and log issues",
    )
    technical_lag_type_ids: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TECHNICAL_LAG_TYPE_IDS),
        description="KPI types whose raw values are remapped by the technical lag transform",
    )

    # ==========================================================================
    # Paths
    # ==========================================================================

    hierarchy_path: Optional[Path] = Field(
        default=None,
        description="YAML or JSON hierarchy definition (default hierarchy if unset)",
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    log_sessions_to_keep: int = Field(
        default=5, ge=1, le=100, description="Number of per-run log files to retain"
    )

    debug: bool = Field(default=False, description="Enable debug mode")


# Global settings instance
settings = Settings()
