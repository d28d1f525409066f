# storyforge/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from storyforge.generate.types import AIConfig


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Storyforge")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # initial generator config; provider "manual" needs nothing else
    AI_PROVIDER: str = Field(default="manual")
    AI_API_KEY: str | None = None
    AI_MODEL: str | None = None
    AI_BASE_URL: str | None = None
    AI_TEMPERATURE: float | None = None
    AI_MAX_TOKENS: int | None = None

    # optional YAML overrides for the values above
    GENERATOR_CONFIG: str = Field(default="config/generator.yaml")

    # read root-level .env.dev
    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME

    def ai_options(self) -> dict:
        return {
            "provider": self.AI_PROVIDER,
            "credential": self.AI_API_KEY,
            "model": self.AI_MODEL,
            "endpoint": self.AI_BASE_URL,
            "temperature": self.AI_TEMPERATURE,
            "max_output_tokens": self.AI_MAX_TOKENS,
        }

    def ai_config(self) -> AIConfig:
        return AIConfig.from_options(self.ai_options())


settings = Settings()
