"""HTTP routes."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/hello", response_class=PlainTextResponse)
async def hello():
    """Static greeting."""
    return "Hello World!"
