from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from modelprices.model.record import DisplayRecord


# ---------------------------------------------------------------------------
# Shared factory helpers
# ---------------------------------------------------------------------------


def make_raw(
    id: str = "openai/gpt-4o",
    name: str = "OpenAI: GPT-4o",
    context_length: int = 128000,
    prompt: str = "0.0000025",
    completion: str = "0.00001",
    input_modalities: list[str] | None = None,
    modality: str = "text+image->text",
    supported_parameters: list[str] | None = None,
    description: str = "Flagship multimodal model.",
    **pricing_extra: str,
) -> dict[str, Any]:
    return {
        "id": id,
        "name": name,
        "created": 1715367049,
        "description": description,
        "context_length": context_length,
        "architecture": {
            "modality": modality,
            "input_modalities": ["text", "image"] if input_modalities is None else input_modalities,
            "output_modalities": ["text"],
            "tokenizer": "GPT",
        },
        "pricing": {"prompt": prompt, "completion": completion, **pricing_extra},
        "top_provider": {"context_length": context_length, "is_moderated": True},
        "per_request_limits": None,
        "supported_parameters": ["tools", "temperature"]
        if supported_parameters is None
        else supported_parameters,
    }


def make_record(
    id: str = "openai/gpt-4o",
    name: str = "GPT-4o",
    provider: str | None = None,
    context_window: str = "128K",
    input_cost: str = "$2.5",
    output_cost: str = "$10.0",
    features: tuple[str, ...] = (),
    modalities: tuple[str, ...] = ("text",),
    description: str = "",
    keep: bool = False,
    **kwargs: Any,
) -> DisplayRecord:
    if provider is None:
        provider = id.split("/", 1)[0].capitalize()
    return DisplayRecord(
        id=id,
        name=name,
        url=f"https://openrouter.ai/models/{id}",
        provider=provider,
        context_window=context_window,
        input_cost=input_cost,
        output_cost=output_cost,
        features=features,
        modalities=modalities,
        description=description,
        keep=keep,
        **kwargs,
    )


def json_transport(
    status_code: int = 200,
    json_body: Any = None,
    text: str | None = None,
) -> httpx.MockTransport:
    """Create a mock transport that returns a fixed response."""
    body = json.dumps(json_body if json_body is not None else {}).encode() if text is None else text.encode()

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code=status_code,
            content=body,
            headers={"content-type": "application/json"},
        )

    return httpx.MockTransport(handler)


class StubFetcher:
    """Fetcher returning queued results; exceptions in the queue are raised."""

    def __init__(self, *results: Any) -> None:
        self.results = list(results)
        self.calls = 0

    def fetch(self) -> tuple[DisplayRecord, ...]:
        self.calls += 1
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return tuple(result)


@pytest.fixture
def catalog() -> tuple[DisplayRecord, ...]:
    return (
        make_record("openai/gpt-4o", "GPT-4o", input_cost="$2.5", features=("Vision",)),
        make_record("anthropic/claude-3.5-sonnet", "Claude 3.5 Sonnet", input_cost="$3.0",
                    context_window="200K", features=("Long context",)),
        make_record("meta-llama/llama-3-8b:free", "Llama 3 8B (free)", input_cost="$0.0",
                    output_cost="$0.0", context_window="8K"),
        make_record("openai/gpt-4o-mini", "GPT-4o mini", input_cost="$0.2",
                    description="Small and cheap."),
        make_record("google/gemini-flash", "Gemini Flash", input_cost="$0.1",
                    modalities=("text", "image", "audio"), context_window="1M"),
    )


class FakeTimer:
    def __init__(self, delay: float, fn) -> None:
        self.delay = delay
        self.fn = fn
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        # Mimics threading.Timer: a cancelled timer never runs.
        if not self.cancelled:
            self.fn()


class FakeTimers:
    def __init__(self) -> None:
        self.created: list[FakeTimer] = []

    def __call__(self, delay: float, fn) -> FakeTimer:
        timer = FakeTimer(delay, fn)
        self.created.append(timer)
        return timer
