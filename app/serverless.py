"""Netlify / AWS Lambda style entry point for the ask pipeline.

Each invocation builds its own HTTP client and adapters; nothing is shared
between calls.
"""

import asyncio
import json
import logging
import os

import httpx

from app.config import Settings
from app.exceptions.handlers import error_response
from app.logging_config import configure_logging
from app.services.ask import build_ask_service
from app.services.request_decoder import decode_audio

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


def _json(status_code: int, payload: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": _JSON_HEADERS,
        "body": json.dumps(payload, ensure_ascii=False),
    }


async def handle_event(event: dict, settings: Settings | None = None) -> dict:
    if event.get("httpMethod") != "POST":
        return {"statusCode": 405, "body": "Method Not Allowed"}

    try:
        audio = await decode_audio(
            event.get("body") or b"",
            event.get("headers") or {},
            base64_encoded=event.get("isBase64Encoded", True),
        )
        settings = settings or Settings()
        async with httpx.AsyncClient(timeout=30.0) as client:
            result = await build_ask_service(client, settings).run(audio)
    except Exception as exc:
        status_code, payload = error_response(exc)
        return _json(status_code, payload)

    return _json(200, result.model_dump())


def handler(event: dict, context: object = None) -> dict:
    configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
    return asyncio.run(handle_event(event))
