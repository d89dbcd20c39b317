"""
HTTP API.

FastAPI application exposing the parser as an upload endpoint.
"""

from docproc.api.app import create_app

__all__ = ["create_app"]
