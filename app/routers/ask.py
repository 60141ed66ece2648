from fastapi import APIRouter, Request

from app.dependencies import AskDep
from app.schemas.responses import AskResponse, ErrorResponse
from app.services.request_decoder import decode_audio

router = APIRouter()


@router.post(
    "/ask",
    response_model=AskResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def ask(request: Request, service: AskDep) -> AskResponse:
    body = await request.body()
    audio = await decode_audio(body, request.headers)
    return await service.run(audio)
