"""Application settings."""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mortgage_calculator.domain.affordability import (
    DEFAULT_MAX_BACK_END_DTI,
    DEFAULT_MAX_FRONT_END_DTI,
    DEFAULT_MAX_TERM_MONTHS,
)


class Settings(BaseSettings):
    """Calculator configuration, read from MORTGAGE_CALC_* environment variables."""

    max_term_months: int = Field(default=DEFAULT_MAX_TERM_MONTHS, ge=1)
    default_max_front_end_dti: Decimal = Field(default=DEFAULT_MAX_FRONT_END_DTI, gt=0, le=1)
    default_max_back_end_dti: Decimal = Field(default=DEFAULT_MAX_BACK_END_DTI, gt=0, le=1)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MORTGAGE_CALC_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Settings are stateless, so a single cached instance is shared."""
    return Settings()
