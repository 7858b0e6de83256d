import json

import pytest

from config import INTERVIEWER_ROUTE, load_config, resolve_route, route_from_settings
from config.registry import GENERATOR_KEY, bind_model, bound_keys, get_model, unbind_model
from config.settings import Settings


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.NUM_REQUIRED_QUESTIONS == 3
    assert settings.INTERVIEWER_VOICE == "en-CA-LiamNeural"
    assert settings.LLM_ENDPOINT.startswith("/")


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("LLM_MODEL", "local-model")
    monkeypatch.setenv("NUM_REQUIRED_QUESTIONS", "5")
    settings = Settings(_env_file=None)
    route = route_from_settings(settings)
    assert route.model == "local-model"
    assert settings.NUM_REQUIRED_QUESTIONS == 5


def test_registry_bind_and_retrieve():
    marker = object()
    bind_model(GENERATOR_KEY, lambda *_: marker)
    assert get_model(GENERATOR_KEY)() is marker
    assert GENERATOR_KEY in bound_keys()
    unbind_model(GENERATOR_KEY)
    with pytest.raises(KeyError):
        get_model(GENERATOR_KEY)


def test_load_config_and_resolve_route(tmp_path):
    path = tmp_path / "app_config.json"
    path.write_text(
        json.dumps(
            {
                "llm_routes": {
                    "local": {"name": "local", "base_url": "http://localhost:11434", "model": "llama3", "timeout_s": 60}
                },
                "registry": {INTERVIEWER_ROUTE: "local"},
            }
        ),
        encoding="utf-8",
    )
    cfg = load_config(path)
    route = resolve_route(cfg, INTERVIEWER_ROUTE)
    assert route.model == "llama3"
    assert route.endpoint == "/v1/chat/completions"
    with pytest.raises(KeyError):
        resolve_route(cfg, "missing.target")
