from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

Language = Literal["te", "en"]


class Reply(BaseModel):
    text: str
    language: Language


class AskResponse(BaseModel):
    text: str
    audio: str  # base64 audio/mpeg


class ErrorResponse(BaseModel):
    error: str
