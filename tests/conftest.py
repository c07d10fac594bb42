"""Shared test fixtures."""

import io

import pytest
from rich.console import Console

from hippocampus.config import Settings
from hippocampus.memory import ConversationStore
from hippocampus.session import ChatSession, SessionContext

_ENV_KEYS = (
    "OPENAI_API_KEY",
    "HIPPO_LLM_BACKEND",
    "HIPPO_OPENAI_MODEL",
    "HIPPO_OPENAI_BASE_URL",
    "HIPPO_TIMEOUT_S",
    "HIPPO_CONVERSATION_PATH",
    "HIPPO_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Isolate from the developer's environment and any local .env file."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def store(tmp_path) -> ConversationStore:
    return ConversationStore(tmp_path / "conversation.json")


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        llm_backend="mock",
        openai_api_key=None,
        openai_model="gpt-4o",
        openai_base_url="https://api.openai.com/v1",
        timeout_s=None,
        conversation_path=tmp_path / "conversation.json",
        log_level="WARNING",
    )


@pytest.fixture
def make_session(settings, store, console):
    def _make(llm) -> ChatSession:
        ctx = SessionContext(settings=settings, store=store, llm=llm, console=console)
        return ChatSession(ctx)

    return _make
