from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol

ApiRole = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: ApiRole
    content: str


class CompletionErrorKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    BAD_RESPONSE = "bad_response"


@dataclass(frozen=True)
class Completion:
    """Outcome of one completion call: either reply content or an error kind."""

    content: str | None = None
    error_kind: CompletionErrorKind | None = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def failure(cls, kind: CompletionErrorKind, error: str) -> Completion:
        return cls(error_kind=kind, error=error)


class LLMClient(Protocol):
    def chat(self, messages: list[ChatMessage]) -> Completion:
        """Return the assistant reply for the given history, or a failure."""
        raise NotImplementedError
