"""Configuration package for the interviewer service."""
from .registry import GENERATOR_KEY, bind_model, get_model, unbind_model
from .routes import INTERVIEWER_ROUTE, AppConfig, LlmRoute, load_config, resolve_route, route_from_settings
from .settings import Settings, settings

__all__ = [
    "AppConfig",
    "GENERATOR_KEY",
    "INTERVIEWER_ROUTE",
    "LlmRoute",
    "Settings",
    "bind_model",
    "get_model",
    "load_config",
    "resolve_route",
    "route_from_settings",
    "settings",
    "unbind_model",
]
