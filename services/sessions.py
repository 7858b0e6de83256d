"""In-memory registry of live interview sessions."""
from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

from config import GENERATOR_KEY, INTERVIEWER_ROUTE, LlmRoute, get_model, load_config, resolve_route, route_from_settings
from config.settings import settings
from interview import Generate, Interviewer, InterviewerOptions
from llm_gateway import ConversationModel

logger = logging.getLogger(__name__)

_SESSIONS: Dict[str, Interviewer] = {}
_SESSIONS_GUARD = threading.Lock()


def interviewer_route() -> LlmRoute:
    """Route from the JSON config when ``LLM_CONFIG_PATH`` is set, else from environment settings."""

    if settings.LLM_CONFIG_PATH is not None:
        return resolve_route(load_config(settings.LLM_CONFIG_PATH), INTERVIEWER_ROUTE)
    return route_from_settings(settings)


def generator_for(options: InterviewerOptions) -> Generate:
    """Fresh collaborator for one session; a bound registry factory takes precedence over HTTP."""

    try:
        factory = get_model(GENERATOR_KEY)
    except KeyError:
        return ConversationModel(interviewer_route(), options=options).generate
    return factory(options)


def register_session(interviewer: Interviewer) -> None:
    with _SESSIONS_GUARD:
        _SESSIONS[interviewer.session_id] = interviewer
    logger.info("Registered interview session %s", interviewer.session_id)


def load_session(session_id: str) -> Optional[Interviewer]:
    """Return the live session for ``session_id`` if present."""

    with _SESSIONS_GUARD:
        return _SESSIONS.get(session_id)


def drop_session(session_id: str) -> bool:
    """Forget ``session_id``; returns False when it was not registered."""

    with _SESSIONS_GUARD:
        dropped = _SESSIONS.pop(session_id, None) is not None
    if dropped:
        logger.info("Dropped interview session %s", session_id)
    return dropped


def clear_sessions() -> None:
    with _SESSIONS_GUARD:
        _SESSIONS.clear()
