from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


@dataclass(frozen=True)
class Settings:
    llm_backend: str

    openai_api_key: str | None
    openai_model: str
    openai_base_url: str
    timeout_s: float | None

    conversation_path: Path
    log_level: str


def load_settings() -> Settings:
    # Allow users to keep secrets in a `.env` next to where they run the chat (not committed).
    load_dotenv(find_dotenv(usecwd=True), override=False)

    def getenv(key: str, default: str | None = None) -> str | None:
        v = os.getenv(key)
        if v is None or v == "":
            return default
        return v

    llm_backend = (getenv("HIPPO_LLM_BACKEND", "openai") or "openai").strip().lower()

    openai_api_key = getenv("OPENAI_API_KEY", None)
    openai_model = getenv("HIPPO_OPENAI_MODEL", "gpt-4o") or ""
    openai_base_url = getenv("HIPPO_OPENAI_BASE_URL", "https://api.openai.com/v1") or ""

    # Unset means the completion call may block indefinitely.
    raw_timeout = getenv("HIPPO_TIMEOUT_S", None)
    timeout_s = float(raw_timeout) if raw_timeout is not None else None

    conversation_path = Path(getenv("HIPPO_CONVERSATION_PATH", "conversation.json") or "conversation.json")
    log_level = (getenv("HIPPO_LOG_LEVEL", "WARNING") or "WARNING").strip().upper()

    return Settings(
        llm_backend=llm_backend,
        openai_api_key=openai_api_key,
        openai_model=openai_model,
        openai_base_url=openai_base_url,
        timeout_s=timeout_s,
        conversation_path=conversation_path,
        log_level=log_level,
    )
