import base64

from app.schemas.responses import AskResponse, Reply


def encode_audio(audio: bytes) -> str:
    return base64.b64encode(audio).decode("ascii")


def assemble_response(reply: Reply, audio: bytes) -> AskResponse:
    return AskResponse(text=reply.text, audio=encode_audio(audio))
