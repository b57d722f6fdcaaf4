"""Configuration management for the payroll core."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta, timezone
from functools import lru_cache

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Settings loaded from environment."""

    local_utc_offset_hours: float
    working_days_per_month: int
    strict_day_types: bool

    @property
    def local_timezone(self) -> timezone:
        """Fixed-offset zone used to bucket clock intervals into civil days."""
        return timezone(timedelta(hours=self.local_utc_offset_hours))

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            local_utc_offset_hours=float(os.getenv("PAYROLL_LOCAL_UTC_OFFSET_HOURS", "8")),
            working_days_per_month=int(os.getenv("PAYROLL_WORKING_DAYS_PER_MONTH", "22")),
            strict_day_types=os.getenv("PAYROLL_STRICT_DAY_TYPES", "false").lower() == "true",
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
