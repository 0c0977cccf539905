"""
Process startup: acquire the listening socket, then hand it to uvicorn.

The socket is bound up front so that a bind failure surfaces as
``BindFailure`` instead of being handled inside uvicorn.
"""

from __future__ import annotations

import logging
import socket

import uvicorn

from src.config import settings
from src.domain.errors import BindFailure

logger = logging.getLogger(__name__)


def bind_listener(host: str, port: int) -> socket.socket:
    """Return a TCP socket bound to ``(host, port)`` or raise ``BindFailure``."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        raise BindFailure(f"cannot bind {host}:{port}: {exc}") from exc
    return sock


def serve(app) -> None:
    sock = bind_listener(settings.host, settings.port)
    config = uvicorn.Config(app, log_level=settings.log_level.lower())
    uvicorn.Server(config).run(sockets=[sock])
