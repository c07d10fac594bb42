from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

StoreRole = Literal["system", "master", "consciousness"]


class ConversationEntry(BaseModel):
    """One persisted turn, named in the store's own role vocabulary."""

    role: StoreRole
    content: str = ""
    refusal: Any = None  # opaque; always written as null


class ConversationLog(BaseModel):
    """On-disk document: chronological list of turns, replayed in order."""

    conversation: list[ConversationEntry] = Field(default_factory=list)
