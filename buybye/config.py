"""
Engine configuration using Pydantic Settings
"""
from datetime import date
from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Engine settings loaded from environment variables
    """
    # Work time
    WORK_HOURS_PER_YEAR: int = Field(default=2080, gt=0)  # 40h x 52 weeks

    # Investment projection
    INVESTMENT_HORIZON_YEARS: int = Field(default=5, ge=0)  # "value if invested instead" horizon

    # Savings timeline
    TIMELINE_HORIZONS: list[int] = [1, 2, 3]

    # "Unsure" outcome reminder presets, hours
    UNSURE_REMINDER_HOURS: list[int] = [1, 24, 48]

    # New user defaults
    DEFAULT_CURRENCY: str = "$"
    DEFAULT_INCOME_MODE: Literal["salary", "hourly"] = "salary"
    DEFAULT_YEARLY_SALARY: Decimal = Decimal("52000")
    DEFAULT_HOURLY_RATE: Decimal = Decimal("25")
    DEFAULT_RETURN_RATE: Decimal = Decimal("10")
    DEFAULT_RETIREMENT_AGE: int = 65
    DEFAULT_BIRTHDAY: date = date(2004, 1, 1)

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BUYBYE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings instance (singleton)
    """
    return Settings()
