from __future__ import annotations

from hippocampus.config import Settings

from .mock import MockLLM
from .openai_compat import OpenAICompatLLM


def build_llm(settings: Settings):
    backend = settings.llm_backend
    if backend == "mock":
        return MockLLM()
    if backend == "openai":
        # A missing key is reported by the first completion call, not here.
        return OpenAICompatLLM(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            timeout_s=settings.timeout_s,
        )
    raise ValueError(f"Unknown HIPPO_LLM_BACKEND={backend!r}, expected: openai|mock")
