"""Greeting endpoint."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from greeter.context import ServiceContext, get_context

router = APIRouter(tags=["greeting"])


@router.get("/", response_class=PlainTextResponse)
async def greet(context: ServiceContext = Depends(get_context)):
    """Say hello (or the configured greeting) from this host."""
    return context.message()
