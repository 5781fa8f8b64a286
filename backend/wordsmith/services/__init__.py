from __future__ import annotations

from functools import lru_cache

from .llm_client import CompletionClient, GeminiCompletionClient
from .registry import TOOLS, ToolDefinition, get_tool
from .session import FlowState, SessionSnapshot, ToolSession


@lru_cache(maxsize=None)
def get_tool_session(name: str) -> ToolSession:
    return ToolSession(get_tool(name))


@lru_cache(maxsize=1)
def get_completion_client() -> CompletionClient:
    return GeminiCompletionClient.from_settings()


__all__ = [
    "TOOLS",
    "CompletionClient",
    "FlowState",
    "GeminiCompletionClient",
    "SessionSnapshot",
    "ToolSession",
    "ToolDefinition",
    "get_completion_client",
    "get_tool",
    "get_tool_session",
]
