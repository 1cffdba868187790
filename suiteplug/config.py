"""Runtime configuration — env-driven via pydantic-settings.

Reads from a .env file and SUITEPLUG_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class SuiteplugConfig(BaseSettings):
    """Configuration with environment variable overrides.

    All settings can be overridden via SUITEPLUG_* environment variables
    or a .env file in the project root.

    Examples
    --------
    Override via environment::

        export SUITEPLUG_LOG_LEVEL=DEBUG
        export SUITEPLUG_REQUIRE='["tests/hooks.py", "myproject.fixtures"]'

    Or via .env file::

        SUITEPLUG_DEBUG=true
        SUITEPLUG_BASE_DIR=/workspace
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SUITEPLUG_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging; debug forces DEBUG regardless of log_level
    log_level: str = "INFO"
    debug: bool = False

    # Require specs loaded when the CLI is given none (file paths or dotted names)
    require: list[str] = []
    base_dir: Path = Path(".")

    @property
    def effective_log_level(self) -> str:
        """The level the CLI logs at when no --log-level is given."""
        return "DEBUG" if self.debug else self.log_level.upper()


# Module-level singleton, import as `from suiteplug.config import config`
config = SuiteplugConfig()
