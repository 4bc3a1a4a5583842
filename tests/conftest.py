"""Pytest configuration and shared fixtures."""
import json
import os

import httpx
import pytest
from rich.console import Console

from transchat.llm import ChatModel, OpenAIProvider


class StubEndpoint:
    """Chat completion endpoint served through httpx.MockTransport.

    Records every request body so tests can inspect the exact payloads the
    OpenAI client sent.
    """

    def __init__(self):
        self.requests: list[dict] = []
        self.replies: list[str] = []
        self.empty_choices = False
        self.status_code = 200
        self.providers: list[OpenAIProvider] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)

        if self.status_code != 200:
            return httpx.Response(
                self.status_code,
                json={"error": {"message": "stub failure", "type": "server_error"}},
            )

        choices = []
        if not self.empty_choices:
            content = self.replies.pop(0) if self.replies else f"reply {len(self.requests)}"
            choices.append({
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            })

        return httpx.Response(200, json={
            "id": f"chatcmpl-{len(self.requests)}",
            "object": "chat.completion",
            "created": 0,
            "model": body["model"],
            "choices": choices,
            "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
        })

    @property
    def payloads(self) -> list[list[dict]]:
        """Message lists of every captured request."""
        return [request["messages"] for request in self.requests]

    def provider(self, model: ChatModel | None = None) -> OpenAIProvider:
        """Create a provider whose HTTP traffic goes to this stub."""
        provider = OpenAIProvider(
            api_key="test-key",
            model=model,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(self)),
        )
        self.providers.append(provider)
        return provider


@pytest.fixture
def stub_endpoint():
    """Return a fresh stub chat completion endpoint."""
    return StubEndpoint()


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openai": os.getenv("OPENAI_API_KEY"),
    }


@pytest.fixture
def plain_console(monkeypatch):
    """Replace the CLI console with one that emits no styling or wrapping."""
    console = Console(color_system=None, width=200)
    monkeypatch.setattr("transchat.cli.app.console", console)
    return console
