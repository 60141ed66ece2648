"""Tests for decode_audio."""

import base64

import pytest

from app.exceptions.custom import InvalidRequest
from app.services.request_decoder import NO_AUDIO_MESSAGE, decode_audio

BOUNDARY = "----testboundary"
HEADERS = {"content-type": f"multipart/form-data; boundary={BOUNDARY}"}
AUDIO = b"\x1aE\xdf\xa3webm-bytes\x00\xff"


def _file_part(name: str, filename: str, data: bytes) -> bytes:
    return (
        f"--{BOUNDARY}\r\n"
        f'Content-Disposition: form-data; name="{name}"; filename="{filename}"\r\n'
        "Content-Type: audio/webm\r\n\r\n"
    ).encode() + data + b"\r\n"


def _field_part(name: str, value: str) -> bytes:
    return (
        f"--{BOUNDARY}\r\n"
        f'Content-Disposition: form-data; name="{name}"\r\n\r\n'
        f"{value}\r\n"
    ).encode()


def _body(*parts: bytes) -> bytes:
    return b"".join(parts) + f"--{BOUNDARY}--\r\n".encode()


async def test_extracts_single_file_part():
    body = _body(_file_part("audio", "recording.webm", AUDIO))
    assert await decode_audio(body, HEADERS) == AUDIO


async def test_base64_encoded_body():
    body = _body(_field_part("lang", "te"), _file_part("audio", "recording.webm", AUDIO))
    encoded = base64.b64encode(body).decode()
    assert await decode_audio(encoded, HEADERS, base64_encoded=True) == AUDIO


async def test_first_file_part_wins():
    body = _body(
        _file_part("audio", "first.webm", b"first"),
        _file_part("audio", "second.webm", b"second"),
    )
    assert await decode_audio(body, HEADERS) == b"first"


async def test_empty_file_part_skipped():
    body = _body(
        _file_part("audio", "empty.webm", b""),
        _file_part("audio", "real.webm", AUDIO),
    )
    assert await decode_audio(body, HEADERS) == AUDIO


async def test_zero_file_parts():
    body = _body(_field_part("note", "hello"))
    with pytest.raises(InvalidRequest) as exc_info:
        await decode_audio(body, HEADERS)
    assert exc_info.value.message == NO_AUDIO_MESSAGE


async def test_only_empty_file_part():
    body = _body(_file_part("audio", "empty.webm", b""))
    with pytest.raises(InvalidRequest) as exc_info:
        await decode_audio(body, HEADERS)
    assert exc_info.value.message == NO_AUDIO_MESSAGE


async def test_non_multipart_content_type():
    with pytest.raises(InvalidRequest):
        await decode_audio(b'{"audio": "x"}', {"content-type": "application/json"})


async def test_missing_content_type():
    with pytest.raises(InvalidRequest):
        await decode_audio(b"whatever", {})


async def test_missing_boundary():
    with pytest.raises(InvalidRequest):
        await decode_audio(b"whatever", {"content-type": "multipart/form-data"})


async def test_invalid_base64():
    with pytest.raises(InvalidRequest):
        await decode_audio("!!!not-base64!!!", HEADERS, base64_encoded=True)
