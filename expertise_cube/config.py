"""Application configuration with validation."""
from typing import List, Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Employee Expertise Cube"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = Field(default=["*"])

    # Storage
    SEED_SAMPLE_DATA: bool = Field(
        default=True,
        description="Pre-populate a freshly built in-memory store with the sample employee",
    )

    # Evaluation merge policy
    EVALUATION_MERGE_POLICY: Literal["replace", "weighted"] = "replace"
    PRIOR_SCORE_WEIGHT: float = Field(default=0.3, ge=0.0, le=1.0)
    EVALUATION_WEIGHT: float = Field(default=0.7, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_merge_weights(self):
        """Weighted merging needs a positive total weight to normalize against."""
        total = self.PRIOR_SCORE_WEIGHT + self.EVALUATION_WEIGHT
        if total <= 0:
            raise ValueError(
                f"PRIOR_SCORE_WEIGHT + EVALUATION_WEIGHT must be positive, got {total}"
            )
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self

    @property
    def merge_weights(self) -> List[float]:
        """Weights for [prior score, new evaluation] under the weighted policy."""
        return [self.PRIOR_SCORE_WEIGHT, self.EVALUATION_WEIGHT]


@lru_cache
def get_settings() -> Settings:
    return Settings()
