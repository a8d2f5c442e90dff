"""Runtime settings: env-driven via pydantic-settings.

Reads INTERAKTOR_* environment variables and an optional .env file.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class InteraktorSettings(BaseSettings):
    """Logging and tracing switches for interaktor invocations.

    Examples
    --------
    Trace every hook while debugging::

        export INTERAKTOR_LOG_LEVEL=DEBUG
        export INTERAKTOR_TRACE_HOOKS=true
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="INTERAKTOR_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    trace_hooks: bool = False  # debug-log every hook as it runs
    log_failures: bool = True  # info-log failures captured by ``call``


# Module-level singleton, import as `from interaktor.config import settings`
settings = InteraktorSettings()
