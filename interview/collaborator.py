"""Language-model collaborator contract used by the agenda builder and turn sequencer."""
from __future__ import annotations

import logging
from typing import Awaitable, Callable

from .errors import CollaboratorFailure

logger = logging.getLogger(__name__)

Generate = Callable[[str], Awaitable[str]]


async def ask(generate: Generate, prompt: str) -> str:
    """Run one completion and return the model's text unchanged.

    Any failure surfaces as :class:`CollaboratorFailure`.
    """

    try:
        text = await generate(prompt)
    except CollaboratorFailure:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.error("Interviewer model call failed: %s", exc)
        raise CollaboratorFailure("Interviewer model call failed") from exc
    if not isinstance(text, str):
        raise CollaboratorFailure(f"Interviewer model returned {type(text).__name__}, expected str")
    return text


__all__ = ["Generate", "ask"]
