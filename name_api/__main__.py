# name_api/__main__.py
"""Run the API under uvicorn: ``python -m name_api``."""

import logging
import sys

import uvicorn

from name_api.config import configure_logging, load_settings
from name_api.errors import ConfigurationError
from name_api.main import create_app

logger = logging.getLogger("name_api")


def main() -> int:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        configure_logging()
        logger.error("Startup aborted: %s", exc)
        return 1

    configure_logging(settings.log_level)
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
