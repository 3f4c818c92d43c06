from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Email transport
    email_provider: str = "ses"  # ses | logging
    # SES client; unset values fall back to the boto3 provider chain
    ses_region: str | None = None
    ses_endpoint_url: str | None = None  # e.g. a local SES emulator
    ses_max_attempts: int | None = None
    aws_profile: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="SESMAILER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("email_provider")
    @classmethod
    def normalize_provider(cls, value: str) -> str:
        return value.strip().lower()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
