"""Application settings and configuration management."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from interview.models import InterviewerVoice


class Settings(BaseSettings):
    """Settings loaded from environment variables or defaults."""

    LLM_BASE_URL: str = "https://api.openai.com"
    LLM_ENDPOINT: str = "/v1/chat/completions"
    LLM_MODEL: str = "gpt-4o-mini"
    LLM_API_KEY_ENV: str = "OPENAI_API_KEY"
    LLM_TIMEOUT_S: float = Field(default=30.0, ge=0.1)
    LLM_MAX_RETRIES: int = Field(default=2, ge=0)
    LLM_TEMPERATURE: Optional[float] = Field(default=0.7, ge=0.0, le=2.0)
    LLM_CONFIG_PATH: Optional[Path] = None

    NUM_REQUIRED_QUESTIONS: int = Field(default=3, ge=0)
    INTERVIEWER_NAME: str = "Sasha"
    INTERVIEWER_VOICE: InterviewerVoice = "en-CA-LiamNeural"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", validate_assignment=True)


settings = Settings()
