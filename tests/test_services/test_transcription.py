import os
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from openai import APIConnectionError

from app.exceptions.custom import TranscriptionFailed
from app.services.transcription import TranscriptionService


@pytest.fixture
def service():
    return TranscriptionService(api_key="test-key")


async def test_transcribe_success(service):
    seen: dict = {}

    async def _create(**kwargs):
        f = kwargs["file"]
        seen["path"] = f.name
        seen["data"] = f.read()
        seen["language"] = kwargs["language"]
        seen["model"] = kwargs["model"]
        return MagicMock(text="మీ నెంబర్ ఏంటి")

    with patch.object(service._client.audio.transcriptions, "create", side_effect=_create):
        text = await service.transcribe(b"audio-bytes")

    assert text == "మీ నెంబర్ ఏంటి"
    assert seen["data"] == b"audio-bytes"
    assert seen["language"] == "te"
    assert seen["model"] == "whisper-1"
    assert seen["path"].endswith("recording.webm")
    assert not os.path.exists(seen["path"])


async def test_transcribe_provider_error_wrapped(service):
    seen: dict = {}

    async def _create(**kwargs):
        seen["path"] = kwargs["file"].name
        raise APIConnectionError(request=httpx.Request("POST", "https://api.openai.com"))

    with patch.object(service._client.audio.transcriptions, "create", side_effect=_create):
        with pytest.raises(TranscriptionFailed):
            await service.transcribe(b"audio-bytes")

    assert not os.path.exists(seen["path"])


async def test_custom_language_and_model():
    service = TranscriptionService(api_key="k", model="gpt-4o-mini-transcribe", language="en")
    mock_create = AsyncMock(return_value=MagicMock(text="hi"))
    with patch.object(service._client.audio.transcriptions, "create", mock_create):
        await service.transcribe(b"x")
    kwargs = mock_create.call_args.kwargs
    assert kwargs["model"] == "gpt-4o-mini-transcribe"
    assert kwargs["language"] == "en"
