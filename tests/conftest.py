from pathlib import Path

import httpx
import pytest
from httpx import ASGITransport

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def homepage_html() -> str:
    return (FIXTURES / "homepage.html").read_text(encoding="utf-8")


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "test-openai-key")
    monkeypatch.setenv("ELEVENLABS_API_KEY", "test-el-key")
    monkeypatch.setenv("ELEVENLABS_VOICE_ID", "test-voice-id")
    monkeypatch.setenv("HOSPITAL_URL", "https://ammahospital.com/")


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
