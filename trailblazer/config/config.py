from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API configuration
    api_version: str = "1.0"
    cors_allow_origins: List[str] = ["*"]

    # Gemini configuration
    # The key is read from GEMINI_API_KEY, or API_KEY for older deployments.
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY", "gemini_api_key"),
    )
    gemini_model: str = "gemini-2.5-flash"
    gemini_dynamic_threshold: float = 0.7

    # Number of distinct trails requested per search
    suggestion_count: int = 3

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
