"""Configuration management for the Library Desk.

Circulation rules (loan period, fine rate) and runtime switches are read
from the environment with a ``LIBRARY_DESK_`` prefix, so a deployment can
change policy without touching code:

1. Circulation Policy - loan period and daily fine
2. Startup Behavior - whether the sample catalog is loaded
3. Diagnostics - log level, debug mode and tracing
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DeskConfig(BaseSettings):
    """Library Desk configuration.

    Every field can be overridden with an environment variable, e.g.
    ``LIBRARY_DESK_LOAN_PERIOD_DAYS=21`` or ``LIBRARY_DESK_LOG_LEVEL=DEBUG``.
    """

    model_config = SettingsConfigDict(
        # Use LIBRARY_DESK_ prefix for all env vars
        env_prefix="LIBRARY_DESK_",
        # Load from .env file if present
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Circulation Policy ===

    loan_period_days: int = Field(
        default=14,
        description="Number of days a book may be kept before it is overdue",
        ge=1,
        le=365,
    )

    fine_per_day: float = Field(
        default=0.50,
        description="Fine charged for each full day a book is overdue",
        ge=0.0,
    )

    currency_symbol: str = Field(
        default="$",
        description="Symbol printed in front of fine amounts",
        min_length=1,
        max_length=3,
    )

    # === Startup Behavior ===

    load_sample_data: bool = Field(
        default=True,
        description="Pre-populate the catalog with a few books and members",
    )

    # === Diagnostics ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    observability_enabled: bool = Field(
        default=False,
        description="Configure logfire tracing for dispatched commands",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug or self.log_level == "DEBUG"

    def format_amount(self, amount: float) -> str:
        """Render a money amount, e.g. ``$1.50``."""
        return f"{self.currency_symbol}{amount:.2f}"


# === Global Configuration Instance ===


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: DeskConfig | None = None


def get_config() -> DeskConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = DeskConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
