from __future__ import annotations

import httpx

from .base import ChatMessage, Completion, CompletionErrorKind


class OpenAICompatLLM:
    """
    Minimal OpenAI-compatible ChatCompletions client via raw HTTP.
    Works with OpenAI or any OpenAI-compatible gateway if you point base_url accordingly.
    Failures are returned as a `Completion` with an error kind, never raised.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str,
        base_url: str = "https://api.openai.com/v1",
        timeout_s: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self._transport = transport

    def chat(self, messages: list[ChatMessage]) -> Completion:
        if not self.api_key:
            return Completion.failure(CompletionErrorKind.MISSING_CREDENTIAL, "OPENAI_API_KEY is not set")

        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "store": True,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            with httpx.Client(timeout=self.timeout_s, transport=self._transport) as client:
                r = client.post(url, json=payload, headers=headers)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as e:
            body = e.response.text[:500]
            return Completion.failure(
                CompletionErrorKind.HTTP_STATUS, f"HTTP {e.response.status_code}: {body}"
            )
        except httpx.HTTPError as e:
            return Completion.failure(CompletionErrorKind.TRANSPORT, str(e) or type(e).__name__)
        except ValueError as e:
            return Completion.failure(CompletionErrorKind.BAD_RESPONSE, f"invalid JSON body: {e}")

        # OpenAI returns: choices[0].message.content (may be null)
        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices:
            return Completion.failure(CompletionErrorKind.BAD_RESPONSE, "response has no choices")
        choice = choices[0]
        if not isinstance(choice, dict):
            return Completion.failure(CompletionErrorKind.BAD_RESPONSE, "choice is not an object")
        msg = choice.get("message") or {}
        if not isinstance(msg, dict):
            return Completion.failure(CompletionErrorKind.BAD_RESPONSE, "message is not an object")
        content = msg.get("content")
        if content is not None and not isinstance(content, str):
            return Completion.failure(CompletionErrorKind.BAD_RESPONSE, "message content is not text")
        return Completion(content=content)
