"""Service Entry Point - Root Module.

This is the root-level entry point for Cloud Run (uvicorn main:app).
It imports from the api package.
"""

from api.main import app

__all__ = [
    "app",
]
