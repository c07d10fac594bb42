"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from hippocampus.config import load_settings

pytestmark = pytest.mark.usefixtures("clean_env")


class TestDefaults:
    def test_backend(self):
        assert load_settings().llm_backend == "openai"

    def test_model(self):
        assert load_settings().openai_model == "gpt-4o"

    def test_no_api_key(self):
        assert load_settings().openai_api_key is None

    def test_no_timeout(self):
        assert load_settings().timeout_s is None

    def test_conversation_path(self):
        assert load_settings().conversation_path == Path("conversation.json")

    def test_log_level(self):
        assert load_settings().log_level == "WARNING"


class TestOverrides:
    def test_env_values(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-abc")
        monkeypatch.setenv("HIPPO_LLM_BACKEND", " Mock ")
        monkeypatch.setenv("HIPPO_TIMEOUT_S", "30")
        monkeypatch.setenv("HIPPO_CONVERSATION_PATH", "data/memory.json")
        monkeypatch.setenv("HIPPO_LOG_LEVEL", "debug")
        s = load_settings()
        assert s.openai_api_key == "sk-abc"
        assert s.llm_backend == "mock"
        assert s.timeout_s == 30.0
        assert s.conversation_path == Path("data/memory.json")
        assert s.log_level == "DEBUG"

    def test_empty_string_counts_as_unset(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "")
        monkeypatch.setenv("HIPPO_OPENAI_MODEL", "")
        s = load_settings()
        assert s.openai_api_key is None
        assert s.openai_model == "gpt-4o"

    def test_dotenv_file_is_read(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("HIPPO_OPENAI_MODEL=gpt-4o-mini\n", encoding="utf-8")
        # load_dotenv writes into os.environ; let monkeypatch undo it.
        monkeypatch.setenv("HIPPO_OPENAI_MODEL", "")
        monkeypatch.delenv("HIPPO_OPENAI_MODEL")
        assert load_settings().openai_model == "gpt-4o-mini"

    def test_bad_timeout_raises(self, monkeypatch):
        monkeypatch.setenv("HIPPO_TIMEOUT_S", "soon")
        with pytest.raises(ValueError):
            load_settings()
