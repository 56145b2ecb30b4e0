from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from percentage.domain.values import DEFAULT_ROUNDING_MODE as DEFAULT_MODE
from percentage.domain.values import (
    NoRounding,
    PreciseRounding,
    Rounding,
    RoundingMode,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PERCENTAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    DEFAULT_SCALE: Optional[int] = Field(
        default=None,
        description="Decimal places to round calculations to, no rounding if unset",
    )

    DEFAULT_ROUNDING_MODE: str = Field(
        default=DEFAULT_MODE.name,
        description="Rounding mode used together with DEFAULT_SCALE",
        examples=["HALF_UP", "HALF_EVEN", "FLOOR"],
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @field_validator("DEFAULT_SCALE")
    @classmethod
    def validate_default_scale(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError(f"DEFAULT_SCALE must be non-negative, got: {value}")
        return value

    @field_validator("DEFAULT_ROUNDING_MODE")
    @classmethod
    def validate_rounding_mode(cls, value: str) -> str:
        return RoundingMode.from_name(value).name

    def default_rounding(self) -> Rounding:
        if self.DEFAULT_SCALE is None:
            return NoRounding()

        return PreciseRounding(self.DEFAULT_SCALE, self.DEFAULT_ROUNDING_MODE)


@lru_cache()
def get_settings() -> Settings:
    from percentage.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.info("Settings loaded successfully")
        return settings

    except Exception as e:
        logger.error(f"Failed to load settings: {e}", exc_info=True)
        raise
