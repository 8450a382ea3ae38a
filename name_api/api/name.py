# name_api/api/name.py

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from name_api.services.name import NameService

router = APIRouter(prefix="/name", tags=["name"])


def get_name_service(request: Request) -> NameService:
    # Set by create_app(); an AttributeError here surfaces as a 500.
    return request.app.state.name_service


@router.get("/", response_class=PlainTextResponse)
def get_name(service: NameService = Depends(get_name_service)) -> PlainTextResponse:
    """
    Return the configured name as a plain-text body.
    """
    return PlainTextResponse(service.get_value())
