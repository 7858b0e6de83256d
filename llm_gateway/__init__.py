from __future__ import annotations  # Re-export llm_gateway public API

from .llm_gateway import AsyncHttpClient, ConversationModel, HttpResponse, LlmGatewayError, call, chat

__all__ = ["AsyncHttpClient", "ConversationModel", "HttpResponse", "LlmGatewayError", "call", "chat"]
