"""API module for cronpoll.

Serve with ``uvicorn --factory cronpoll.api.http_server:create_app``.
"""

from .http_server import create_app

__all__ = ["create_app"]
