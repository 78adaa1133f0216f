"""Runtime configuration — env-driven via pydantic-settings.

Reads from a .env file and LEDGERPULSE_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class PulseConfig(BaseSettings):
    """Runtime configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export LEDGERPULSE_LOG_LEVEL=DEBUG
        export LEDGERPULSE_SHOW_NON_ENABLED=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LEDGERPULSE_",
        env_file_encoding="utf-8",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"
    debug: bool = False

    # Presentation
    show_non_enabled: bool = False  # also render entry types not enabled yet
    marker_limit: int = 48  # markers drawn per cell before "+N" truncation

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"


# Module-level singleton, import as `from ledgerpulse.config import config`
config = PulseConfig()
