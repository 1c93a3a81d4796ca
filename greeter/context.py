"""Read-only per-process context shared by request handlers."""

import logging
import socket
from dataclasses import dataclass

from fastapi import Request

from greeter.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceContext:
    greeting: str
    hostname: str

    def message(self) -> str:
        return f"{self.greeting} from {self.hostname}\n"


def resolve_hostname() -> str:
    """Return the machine name reported by the OS.

    Raises OSError if the name cannot be read, which callers treat as a
    startup failure.
    """
    hostname = socket.gethostname()
    if not hostname:
        raise OSError("operating system reported an empty hostname")
    return hostname


def build_context(settings: Settings) -> ServiceContext:
    hostname = resolve_hostname()
    logger.info(f"Resolved hostname: {hostname}")
    return ServiceContext(greeting=settings.greeting, hostname=hostname)


def get_context(request: Request) -> ServiceContext:
    """FastAPI dependency returning the context stored on the app."""
    return request.app.state.context
