"""Pytest configuration for MTG Lore Lookup backend tests."""
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
from httpx import AsyncClient, ASGITransport

# Ensure the backend package is importable
backend_root = Path(__file__).resolve().parent.parent
if str(backend_root) not in sys.path:
    sys.path.insert(0, str(backend_root))

from mtg_lore.config import Settings  # noqa: E402
from mtg_lore.llm_gateway.providers.base import BaseLLMProvider  # noqa: E402
from mtg_lore.main import create_app  # noqa: E402


NAHIRI_LORE = {
    "name": "Nahiri",
    "plane": "Zendikar",
    "affiliations": ["Kor", "Planeswalkers"],
    "summary": "A kor lithomancer who helped seal the Eldrazi on Zendikar. "
               "Abandoned in her hour of need, she sought revenge on Sorin by luring Emrakul to Innistrad.",
    "nahiri_relationship": "loved_ones",
    "aurelia_relationship": "neutral",
}


class FakeProvider(BaseLLMProvider):
    """In-memory provider recording every call."""

    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None, delay: float = 0.0):
        super().__init__(api_key="test-key", model="fake-model")
        self.content = content
        self.error = error
        self.delay = delay
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    async def chat(self, messages, temperature=None, max_tokens=None, json_mode=False):
        self.calls.append({
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "json_mode": json_mode,
        })
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return {"content": self.content, "usage": {}, "model": self.model, "finish_reason": "stop"}

    def get_provider_name(self) -> str:
        return "fake"

    async def aclose(self) -> None:
        self.closed = True

    @property
    def user_prompt(self) -> str:
        return self.calls[-1]["messages"][-1]["content"]


def make_settings(**overrides) -> Settings:
    values = {
        "llm_provider": "openai",
        "openai_api_key": "test-key",
        "anthropic_api_key": None,
        "log_dir": None,
        "_env_file": None,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def provider():
    return FakeProvider(content=json.dumps(NAHIRI_LORE))


@pytest.fixture
def app(settings, provider):
    application = create_app(settings)
    application.state.llm_provider = provider
    return application


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
