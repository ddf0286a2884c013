from functools import lru_cache
import os
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MissingCredentialError(RuntimeError):
    """Raised when a provider credential is absent or blank."""


class Settings(BaseSettings):
    # Credentials default to empty so each client fails on its own, not here.
    DEEPGRAM_API_KEY: str = ""
    XAI_API_KEY: str = ""
    OPENAI_API_KEY: str = ""

    # xAI speaks the OpenAI wire format on its own endpoint
    XAI_BASE_URL: str = "https://api.x.ai/v1"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # .env 파일 위치 (app/core/config.py 기준 루트 폴더의 .env)
    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(__file__), "../../.env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def require_credential(name: str, value: str | None) -> str:
    if not value or not value.strip():
        raise MissingCredentialError(f"Missing {name} in environment (.env)")
    return value.strip()
