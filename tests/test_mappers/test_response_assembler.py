import base64

from app.mappers.response_assembler import assemble_response
from app.schemas.responses import Reply


def test_audio_survives_base64_round_trip():
    audio = bytes(range(256)) * 4
    resp = assemble_response(Reply(text="hello", language="en"), audio)
    assert resp.text == "hello"
    assert base64.b64decode(resp.audio) == audio


def test_empty_audio():
    resp = assemble_response(Reply(text="x", language="en"), b"")
    assert resp.audio == ""
