from .base import ChatMessage, Completion, CompletionErrorKind, LLMClient
from .factory import build_llm

__all__ = ["ChatMessage", "Completion", "CompletionErrorKind", "LLMClient", "build_llm"]
