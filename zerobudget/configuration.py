"""Mini README: Centralised configuration for the budgeting tracker.

Structure:
    * BudgetSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to locate the ledger file, pick a log level, and
    choose where the JSON API binds. Values come from ``ZEROBUDGET_*``
    environment variables or a local ``.env`` file. The result is cached, so
    tests that tweak the environment call ``get_settings.cache_clear()``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class BudgetSettings(BaseSettings):
    """Runtime configuration for the budgeting tracker."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    ledger_path: Path = Field(
        Path("budget.json"),
        description="JSON file holding every recorded monthly budget.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name, e.g. DEBUG or WARNING.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the JSON API to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the JSON API exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "ZEROBUDGET_"
        env_file = ".env"
        case_sensitive = False

    @validator("ledger_path", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand user directories and make sure the parent folder exists."""

        path = Path(value).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @validator("log_level")
    def _normalise_level(cls, value: str) -> str:
        """Store level names upper-cased so logging accepts them directly."""

        return value.strip().upper()


@lru_cache()
def get_settings() -> BudgetSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgetSettings()
