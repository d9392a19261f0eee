"""Tests for the Gemini wrapper with the SDK client replaced by a fake."""

from types import SimpleNamespace

import pytest

from config import settings
from services import gemini_client


class FakeModels:
    def __init__(self, text: str | None = None, error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[dict] = []

    async def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


@pytest.fixture
def fake_models(monkeypatch):
    def install(**kwargs) -> FakeModels:
        models = FakeModels(**kwargs)
        client = SimpleNamespace(aio=SimpleNamespace(models=models))
        monkeypatch.setattr(gemini_client, "get_client", lambda: client)
        return models
    return install


def test_no_api_key_disables_client(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "")
    assert gemini_client.get_client() is None


@pytest.mark.asyncio
async def test_generate_json_strips_fences(fake_models):
    models = fake_models(text='```json\n{"role": "Fleet Manager"}\n```')
    assert await gemini_client.generate_json("prompt") == {"role": "Fleet Manager"}

    call = models.calls[0]
    assert call["model"] == settings.gemini_model
    assert call["config"].response_mime_type == "application/json"


@pytest.mark.asyncio
async def test_generate_json_invalid_json(fake_models):
    fake_models(text="Sure! Here is the requirement: role=driver")
    assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
async def test_generate_json_requires_object(fake_models):
    fake_models(text='["forklift", "warehouse"]')
    assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
async def test_api_error_returns_none(fake_models):
    fake_models(error=RuntimeError("503 unavailable"))
    assert await gemini_client.generate_text("prompt") is None
    assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
async def test_generate_text_trims(fake_models):
    fake_models(text="  Strong match.  ")
    assert await gemini_client.generate_text("prompt") == "Strong match."


@pytest.mark.asyncio
async def test_generate_text_empty_reply(fake_models):
    fake_models(text=None)
    assert await gemini_client.generate_text("prompt") is None
