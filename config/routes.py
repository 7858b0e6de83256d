"""LLM route configuration loaded from JSON or from settings."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from pydantic import BaseModel, Field

from .settings import Settings


class LlmRoute(BaseModel):
    """LLM endpoint configuration."""

    name: str
    base_url: str
    endpoint: str = "/v1/chat/completions"
    model: str
    timeout_s: float = Field(default=30.0, ge=0.1)
    max_retries: int = Field(default=2, ge=0)
    api_key_env: str | None = None
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    extra_headers: Dict[str, str] = Field(default_factory=dict)


class AppConfig(BaseModel):
    """Application configuration root."""

    llm_routes: Dict[str, LlmRoute]
    registry: Dict[str, str]


INTERVIEWER_ROUTE = "interview.interviewer"  # Registry target for the interviewer model


def load_config(path: Path) -> AppConfig:
    """Load configuration from disk."""

    data = path.read_text(encoding="utf-8")
    return AppConfig.model_validate_json(data)


def resolve_route(cfg: AppConfig, target: str) -> LlmRoute:
    """Look up the route bound to ``target``."""

    if target not in cfg.registry:
        raise KeyError(f"Registry entry missing for '{target}'")
    route_id = cfg.registry[target]
    if route_id not in cfg.llm_routes:
        raise KeyError(f"Route '{route_id}' missing for '{target}'")
    return cfg.llm_routes[route_id]


def route_from_settings(settings: Settings) -> LlmRoute:
    """Build the interviewer route from environment-driven settings."""

    return LlmRoute(
        name="interviewer",
        base_url=settings.LLM_BASE_URL,
        endpoint=settings.LLM_ENDPOINT,
        model=settings.LLM_MODEL,
        timeout_s=settings.LLM_TIMEOUT_S,
        max_retries=settings.LLM_MAX_RETRIES,
        api_key_env=settings.LLM_API_KEY_ENV,
        temperature=settings.LLM_TEMPERATURE,
    )
