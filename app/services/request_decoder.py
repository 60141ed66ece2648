import base64
import binascii
import logging
from collections.abc import AsyncGenerator, Mapping

from starlette.datastructures import Headers, UploadFile
from starlette.formparsers import MultiPartException, MultiPartParser

from app.exceptions.custom import InvalidRequest

logger = logging.getLogger(__name__)

NO_AUDIO_MESSAGE = "No audio file uploaded."


async def _single_chunk(data: bytes) -> AsyncGenerator[bytes, None]:
    yield data


async def decode_audio(
    body: bytes | str,
    headers: Mapping[str, str],
    *,
    base64_encoded: bool = False,
) -> bytes:
    """Extract the uploaded recording from a multipart/form-data body.

    The first non-empty file part wins. Raises InvalidRequest when the body
    is not multipart, cannot be parsed, or holds no audio.
    """
    if isinstance(body, str):
        body = body.encode()

    if base64_encoded:
        try:
            body = base64.b64decode(body)
        except (binascii.Error, ValueError) as exc:
            raise InvalidRequest("Request body is not valid base64.") from exc

    parsed_headers = Headers(headers=dict(headers))
    content_type = parsed_headers.get("content-type", "")
    if not content_type.lower().startswith("multipart/form-data"):
        raise InvalidRequest("Expected a multipart/form-data body.")

    parser = MultiPartParser(parsed_headers, _single_chunk(body))
    try:
        form = await parser.parse()
    except (MultiPartException, ValueError) as exc:
        raise InvalidRequest(f"Could not parse multipart body: {exc}") from exc

    try:
        for _field, value in form.multi_items():
            if not isinstance(value, UploadFile):
                continue
            audio = await value.read()
            if audio:
                logger.info(
                    "Received audio %s (%s, %d bytes)",
                    value.filename,
                    value.content_type,
                    len(audio),
                )
                return audio
    finally:
        await form.close()

    raise InvalidRequest(NO_AUDIO_MESSAGE)
