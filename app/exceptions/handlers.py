import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import InvalidRequest, SynthesisFailed, TranscriptionFailed, UpstreamFetchFailed

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error. Please try again."

_UPSTREAM_LABELS = {
    UpstreamFetchFailed: "Hospital page fetch",
    TranscriptionFailed: "Transcription",
    SynthesisFailed: "Speech synthesis",
}


def error_response(exc: Exception) -> tuple[int, dict]:
    """Map a pipeline exception to (status_code, body). Detail stays in the logs."""
    if isinstance(exc, InvalidRequest):
        logger.warning("Invalid request: %s", exc.message)
        return 400, {"error": exc.message}

    label = _UPSTREAM_LABELS.get(type(exc))
    if label:
        logger.error(
            "%s failed: %s (status=%s)", label, exc.message, exc.status_code
        )
    else:
        logger.error("Unhandled error", exc_info=exc)
    return 500, {"error": GENERIC_ERROR}


async def invalid_request_handler(_request: Request, exc: InvalidRequest) -> JSONResponse:
    status_code, content = error_response(exc)
    return JSONResponse(status_code=status_code, content=content)


async def upstream_error_handler(
    _request: Request,
    exc: UpstreamFetchFailed | TranscriptionFailed | SynthesisFailed,
) -> JSONResponse:
    status_code, content = error_response(exc)
    return JSONResponse(status_code=status_code, content=content)


async def unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    status_code, content = error_response(exc)
    return JSONResponse(status_code=status_code, content=content)
