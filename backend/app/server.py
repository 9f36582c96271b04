"""
Zomato Backend — Server Entry Point
=====================================

What:  Binds the listening socket and runs the app under uvicorn.
Why:   Binding ourselves (instead of letting uvicorn do it) makes a busy port
       an OSError we can log clearly before exiting.
Who:   The `zomato-backend` console script and `python -m app`.
"""

import logging
import socket
import sys

import uvicorn

from app.config import settings
from app.main import app, setup_logging

logger = logging.getLogger(__name__)

LISTEN_BACKLOG = 2048


def bind_listener(host: str, port: int) -> socket.socket:
    """
    Create a listening TCP socket on (host, port).

    SO_REUSEADDR lets a restart reuse a port left in TIME_WAIT, but a port
    with a live listener is still rejected.

    Raises:
        OSError: the address is in use or cannot be bound.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(LISTEN_BACKLOG)
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def run() -> None:
    """Bind the configured port and serve until interrupted."""
    setup_logging()

    try:
        sock = bind_listener(settings.backend_host, settings.backend_port)
    except OSError as e:
        logger.error(
            "Cannot listen on %s:%d: %s",
            settings.backend_host,
            settings.backend_port,
            e,
        )
        sys.exit(1)

    config = uvicorn.Config(
        app,
        log_level=settings.log_level.lower(),
        log_config=None,  # keep the handlers installed by setup_logging()
    )
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


if __name__ == "__main__":
    run()
