from typing import Annotated

from fastapi import Depends, Request

from app.services.ask import AskService


def get_ask_service(request: Request) -> AskService:
    return request.app.state.ask_service


AskDep = Annotated[AskService, Depends(get_ask_service)]
