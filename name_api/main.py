# name_api/main.py

import logging
from typing import Optional

from fastapi import FastAPI

from name_api.api.name import router as name_router
from name_api.config import NameSettings, load_settings
from name_api.services.name import NameService

logger = logging.getLogger(__name__)

TITLE = "Name API"
VERSION = "0.1.0"


def create_app(
    settings: Optional[NameSettings] = None,
    service: Optional[NameService] = None,
) -> FastAPI:
    """
    Build the FastAPI app with an explicitly constructed NameService.

    Raises ConfigurationError when settings are not passed and cannot be loaded.
    """
    if settings is None:
        settings = load_settings()
    if service is None:
        service = NameService.from_settings(settings)

    docs = settings.docs_enabled
    app = FastAPI(
        title=TITLE,
        version=VERSION,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
        redirect_slashes=False,
    )
    app.state.name_service = service
    app.include_router(name_router)

    logger.info(
        "%s ready; serving configured name (%d chars) on /name/",
        TITLE,
        len(service.get_value()),
    )
    return app
