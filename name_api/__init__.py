# name_api/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn name_api:create_app --factory
"""

from .main import create_app

__all__ = ["create_app"]
