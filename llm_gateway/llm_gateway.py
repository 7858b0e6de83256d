from __future__ import annotations  # Async LLM request gateway module

import logging
import os
from typing import Any, Dict, List, Optional, Protocol, Sequence

import httpx

from config import LlmRoute
from interview.models import InterviewerOptions
from interview.prompts import persona_system_prompt


logger = logging.getLogger(__name__)  # Module logger setup

RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


class AsyncHttpClient(Protocol):  # Minimal async HTTP client protocol
    async def post(self, url: str, *, json: Dict[str, Any], headers: Dict[str, str], timeout: float) -> "HttpResponse": ...


class HttpResponse(Protocol):  # Minimal HTTP response protocol
    @property
    def status_code(self) -> int: ...

    def json(self) -> Any: ...

    @property
    def text(self) -> str: ...


class LlmGatewayError(RuntimeError):  # Base gateway error
    pass


async def call(
    task: str,
    *,
    cfg: LlmRoute,
    client: Optional[AsyncHttpClient] = None,
    options: Optional[Dict[str, Any]] = None,
) -> str:  # Single user prompt, plain text reply
    return await chat([{"role": "user", "content": task}], cfg=cfg, client=client, options=options)


async def chat(
    messages: Sequence[Dict[str, str]],
    *,
    cfg: LlmRoute,
    client: Optional[AsyncHttpClient] = None,
    options: Optional[Dict[str, Any]] = None,
) -> str:  # Invoke configured LLM route and return the reply text
    payload: Dict[str, Any] = {"model": cfg.model, "messages": _normalize_messages(messages)}
    if cfg.temperature is not None:
        payload["temperature"] = cfg.temperature
    if options:
        payload.update(options)
    headers = {"Content-Type": "application/json"}
    if cfg.api_key_env:
        api_key = os.getenv(cfg.api_key_env)
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
    headers.update(cfg.extra_headers)

    url = f"{cfg.base_url}{cfg.endpoint}"
    attempts = cfg.max_retries + 1
    preview = _preview(payload["messages"])
    if len(preview) > 120:
        preview = preview[:117] + "..."
    logger.info("LLM request start route=%s model=%s attempts=%d preview=%s", cfg.name, cfg.model, attempts, preview)

    last_error: Optional[Exception] = None
    for attempt in range(attempts):
        try:
            response = await _post(url, payload, headers, cfg.timeout_s, client)
        except httpx.HTTPError as exc:
            logger.warning("LLM transport failure route=%s attempt=%d/%d: %s", cfg.name, attempt + 1, attempts, exc)
            last_error = exc
            continue
        if response.status_code in RETRYABLE_STATUS:
            logger.warning(
                "LLM retryable status route=%s attempt=%d/%d status=%s",
                cfg.name,
                attempt + 1,
                attempts,
                response.status_code,
            )
            last_error = LlmGatewayError(f"LLM returned status {response.status_code}")
            continue
        if response.status_code >= 400:
            logger.error("LLM error status: %s", response.status_code)
            raise LlmGatewayError(f"LLM returned status {response.status_code}")
        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Invalid JSON payload from LLM: %s", exc)
            raise LlmGatewayError("LLM payload was not JSON") from exc
        content = _extract_content(data).strip()
        logger.info("LLM request done route=%s model=%s attempt=%d", cfg.name, cfg.model, attempt + 1)
        return content
    raise LlmGatewayError(f"LLM request failed after {attempts} attempts") from last_error


class ConversationModel:  # Persona-primed chat model with buffer memory, one per interview
    def __init__(
        self,
        route: LlmRoute,
        *,
        options: InterviewerOptions,
        client: Optional[AsyncHttpClient] = None,
    ) -> None:
        self._route = route
        self._client = client
        self._system = persona_system_prompt(options)
        self._memory: List[Dict[str, str]] = []

    @property
    def memory(self) -> List[Dict[str, str]]:
        return list(self._memory)

    async def generate(self, prompt: str) -> str:  # Collaborator entry point: prompt in, reply text out
        messages = [{"role": "system", "content": self._system}, *self._memory, {"role": "user", "content": prompt}]
        reply = await chat(messages, cfg=self._route, client=self._client)
        self._memory.extend([{"role": "user", "content": prompt}, {"role": "assistant", "content": reply}])
        return reply


async def _post(
    url: str,
    payload: Dict[str, Any],
    headers: Dict[str, str],
    timeout: float,
    client: Optional[AsyncHttpClient],
) -> HttpResponse:  # Dispatch HTTP request
    if client is not None:
        return await client.post(url, json=payload, headers=headers, timeout=timeout)
    async with httpx.AsyncClient(timeout=timeout) as http_client:
        return await http_client.post(url, json=payload, headers=headers)


def _normalize_messages(messages: Sequence[Dict[str, str]]) -> list[Dict[str, str]]:  # Ensure message payload shape
    normalized: list[Dict[str, str]] = []
    for item in messages:
        if not isinstance(item, dict):
            raise TypeError("Each chat message must be a dict with role/content")
        role = str(item.get("role", "")).strip()
        content = str(item.get("content", ""))
        if not role:
            raise ValueError("Chat message missing role")
        normalized.append({"role": role, "content": content})
    return normalized


def _preview(messages: Sequence[Dict[str, str]]) -> str:  # Last user line, for logging
    for message in reversed(messages):
        text = message.get("content", "").strip()
        if message.get("role") == "user" and text:
            return text.splitlines()[0]
    return ""


def _extract_content(data: Any) -> str:  # Extract message content from LLM response
    if isinstance(data, dict):
        choices = data.get("choices")
        if isinstance(choices, list) and choices:
            message = choices[0].get("message") if isinstance(choices[0], dict) else None
            content = message.get("content") if isinstance(message, dict) else None
            if isinstance(content, str):
                return content
        if isinstance(data.get("content"), str):
            return data["content"]
    raise LlmGatewayError("LLM response missing content")
