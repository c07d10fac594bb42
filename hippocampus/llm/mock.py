from __future__ import annotations

from .base import ChatMessage, Completion


class MockLLM:
    """Deterministic mock backend: useful to try the chat loop without an API key."""

    def chat(self, messages: list[ChatMessage]) -> Completion:
        last_user = next((m.content for m in reversed(messages) if m.role == "user"), "")
        turns = sum(1 for m in messages if m.role == "user")
        return Completion(content=f"[mock] I remember {turns} turn(s). You said: {last_user}")
