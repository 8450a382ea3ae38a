# app.py
"""
Thin entrypoint for the API.

Usage example:
    NAME_MYNAME=Alice uvicorn app:app --reload
"""

from name_api import create_app
from name_api.config import configure_logging, load_settings

settings = load_settings()
configure_logging(settings.log_level)

app = create_app(settings)
