from __future__ import annotations

from hippocampus.llm.base import ChatMessage

HIPPOCAMPUS_SYSTEM = (
    "You are the hippocampus of Person A. You hold and preserve all of Person A's memories. "
    "From now on, respond not as a generic assistant, but as the embodiment of Person A's "
    "recollections and experiences."
)

FIRST_USER_TURN = "Write a haiku about recursion in programming."

# Written to an empty memory on first run.
SEED_MESSAGES: tuple[ChatMessage, ...] = (
    ChatMessage("system", HIPPOCAMPUS_SYSTEM),
    ChatMessage("user", FIRST_USER_TURN),
)
