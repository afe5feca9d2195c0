"""Smoke tests for FastAPI endpoints."""
import json
import logging

import pytest
from httpx import AsyncClient, ASGITransport

from conftest import FakeProvider, NAHIRI_LORE, make_settings
from mtg_lore.exceptions import (
    GENERIC_FAILURE_MESSAGE,
    INVALID_FORMAT_MESSAGE,
    INVALID_NAME_MESSAGE,
    PARSE_FAILED_MESSAGE,
)
from mtg_lore.main import create_app


async def _post_with(app, body):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.post("/api/lore", json=body)


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_health_without_api_key():
    app = create_app(make_settings(openai_api_key=None))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_lifespan_closes_provider(app, provider):
    async with app.router.lifespan_context(app):
        pass
    assert provider.closed
    assert app.state.llm_provider is None


@pytest.mark.asyncio
async def test_unknown_route_404(client):
    resp = await client.get("/api/nonexistent")
    assert resp.status_code in (404, 405)


# --- POST /api/lore: success ---

class TestLoreSuccess:
    @pytest.mark.asyncio
    async def test_nahiri_relationship_preserved(self, client, provider):
        resp = await client.post("/api/lore", json={"characterName": "Nahiri"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["nahiri_relationship"] == "loved_ones"
        assert data == NAHIRI_LORE

    @pytest.mark.asyncio
    async def test_exactly_one_call_with_name_verbatim(self, client, provider):
        await client.post("/api/lore", json={"characterName": "Nahiri"})
        assert len(provider.calls) == 1
        assert "Nahiri" in provider.user_prompt

    @pytest.mark.asyncio
    async def test_name_is_trimmed(self, client, provider):
        resp = await client.post("/api/lore", json={"characterName": "  Sorin Markov \n"})
        assert resp.status_code == 200
        assert provider.user_prompt == "Provide the lore for the Magic: The Gathering character: Sorin Markov"

    @pytest.mark.asyncio
    async def test_missing_relationships_are_omitted(self, client, provider):
        payload = {k: v for k, v in NAHIRI_LORE.items() if not k.endswith("_relationship")}
        provider.content = json.dumps(payload)
        resp = await client.post("/api/lore", json={"characterName": "Nahiri"})
        assert resp.status_code == 200
        assert "aurelia_relationship" not in resp.json()
        assert "nahiri_relationship" not in resp.json()

    @pytest.mark.asyncio
    async def test_success_logs_no_error(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="mtg_lore"):
            resp = await client.post("/api/lore", json={"characterName": "Nahiri"})
        assert resp.status_code == 200
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


# --- POST /api/lore: bad input ---

class TestLoreBadRequest:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"characterName": ""},
        {"characterName": "   \t"},
        {"characterName": None},
        {"characterName": 42},
        {"characterName": ["Nahiri"]},
        {},
        {"character_name": "Nahiri"},
    ])
    async def test_invalid_name_rejected_without_call(self, client, provider, body):
        resp = await client.post("/api/lore", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": INVALID_NAME_MESSAGE}
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_malformed_body_rejected(self, client, provider):
        resp = await client.post(
            "/api/lore",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json() == {"error": INVALID_NAME_MESSAGE}
        assert provider.calls == []


# --- POST /api/lore: misconfiguration ---

class TestLoreMisconfigured:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", [None, "", "   "])
    async def test_missing_key_returns_500_without_call(self, key):
        fake = FakeProvider(content=json.dumps(NAHIRI_LORE))
        app = create_app(make_settings(openai_api_key=key))
        app.state.llm_provider = fake

        resp = await _post_with(app, {"characterName": "Nahiri"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "OpenAI API key is not configured on the server"}
        assert fake.calls == []

    @pytest.mark.asyncio
    async def test_anthropic_key_message(self):
        app = create_app(make_settings(llm_provider="anthropic", openai_api_key="set-but-unused"))
        resp = await _post_with(app, {"characterName": "Nahiri"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Anthropic API key is not configured on the server"}

    @pytest.mark.asyncio
    async def test_input_checked_before_configuration(self):
        app = create_app(make_settings(openai_api_key=None))
        resp = await _post_with(app, {"characterName": " "})
        assert resp.status_code == 400


# --- POST /api/lore: provider failures ---

class TestLoreProviderFailures:
    @pytest.mark.asyncio
    async def test_fenced_reply_with_prose_is_parse_failure(self, client, provider):
        provider.content = (
            "Sure! Here is the lore:\n```json\n" + json.dumps(NAHIRI_LORE) + "\n```\nHope that helps."
        )
        resp = await client.post("/api/lore", json={"characterName": "Nahiri"})
        assert resp.status_code == 500
        assert resp.json() == {"error": PARSE_FAILED_MESSAGE}

    @pytest.mark.asyncio
    async def test_deeply_nested_reply_is_parse_failure(self, client, provider):
        provider.content = "[" * 100000 + "]" * 100000
        resp = await client.post("/api/lore", json={"characterName": "Nahiri"})
        assert resp.status_code == 500
        assert resp.json() == {"error": PARSE_FAILED_MESSAGE}

    @pytest.mark.asyncio
    async def test_free_text_is_parse_failure(self, client, provider):
        provider.content = "Nahiri is a kor lithomancer from Zendikar."
        resp = await client.post("/api/lore", json={"characterName": "Nahiri"})
        assert resp.status_code == 500
        assert resp.json() == {"error": PARSE_FAILED_MESSAGE}

    @pytest.mark.asyncio
    async def test_missing_plane_is_shape_invalid(self, client, provider):
        payload = dict(NAHIRI_LORE)
        del payload["plane"]
        provider.content = json.dumps(payload)
        resp = await client.post("/api/lore", json={"characterName": "Nahiri"})
        assert resp.status_code == 500
        assert resp.json() == {"error": INVALID_FORMAT_MESSAGE}

    @pytest.mark.asyncio
    async def test_missing_summary_distinct_from_parse_failure(self, client, provider):
        payload = dict(NAHIRI_LORE)
        del payload["summary"]
        provider.content = json.dumps(payload)
        resp = await client.post("/api/lore", json={"characterName": "Nahiri"})
        assert resp.status_code == 500
        assert resp.json()["error"] == INVALID_FORMAT_MESSAGE
        assert resp.json()["error"] != PARSE_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_unknown_relationship_is_shape_invalid(self, client, provider):
        provider.content = json.dumps(dict(NAHIRI_LORE, aurelia_relationship="frenemies"))
        resp = await client.post("/api/lore", json={"characterName": "Nahiri"})
        assert resp.status_code == 500
        assert resp.json() == {"error": INVALID_FORMAT_MESSAGE}

    @pytest.mark.asyncio
    async def test_provider_exception_is_generic(self, client, provider):
        provider.error = RuntimeError("Error code: 401 - invalid_api_key sk-secret")
        resp = await client.post("/api/lore", json={"characterName": "Nahiri"})
        assert resp.status_code == 500
        assert resp.json() == {"error": GENERIC_FAILURE_MESSAGE}
        assert "sk-secret" not in resp.text
        assert len(provider.calls) == 1

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, client, provider, caplog):
        provider.content = "not json at all"
        with caplog.at_level(logging.INFO, logger="mtg_lore"):
            await client.post("/api/lore", json={"characterName": "Nahiri"})
        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "LoreParseError" in errors[0].getMessage()
