from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import (
    InvalidRequest,
    SynthesisFailed,
    TranscriptionFailed,
    UpstreamFetchFailed,
)
from app.exceptions.handlers import (
    invalid_request_handler,
    unhandled_error_handler,
    upstream_error_handler,
)
from app.logging_config import configure_logging
from app.routers.ask import router as ask_router
from app.services.ask import build_ask_service


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()
    configure_logging(settings.log_level)

    async with httpx.AsyncClient(timeout=30.0) as client:
        app.state.ask_service = build_ask_service(client, settings)
        yield


app = FastAPI(title="Hospital Voice Assistant", lifespan=lifespan)

app.add_exception_handler(InvalidRequest, invalid_request_handler)
app.add_exception_handler(UpstreamFetchFailed, upstream_error_handler)
app.add_exception_handler(TranscriptionFailed, upstream_error_handler)
app.add_exception_handler(SynthesisFailed, upstream_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

app.include_router(ask_router)
