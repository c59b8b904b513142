"""
Run the catalog API under uvicorn with a bounded graceful shutdown.

Usage:
    catalog-server
    python -m catalog.server
"""

import contextlib
import enum
import logging
import signal
import socket
import sys
import threading
import time

import uvicorn

from catalog.config import (
    HOST,
    LOG_LEVEL,
    PORT,
    READ_TIMEOUT_SECONDS,
    SHUTDOWN_TIMEOUT_SECONDS,
)
from catalog.main import create_app

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class ServerState(enum.Enum):
    STARTING = "starting"
    SERVING = "serving"
    SHUTTING_DOWN = "shutting_down"
    STOPPED = "stopped"


class CatalogServer(uvicorn.Server):
    """uvicorn.Server that tracks its lifecycle state."""

    def __init__(self, config: uvicorn.Config):
        super().__init__(config)
        self.state = ServerState.STARTING
        self.forced_shutdown = False

    @contextlib.contextmanager
    def capture_signals(self):
        # Handled signals end in a normal return from run(), never a re-raise.
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        original_handlers = {
            sig: signal.signal(sig, self.handle_exit) for sig in SHUTDOWN_SIGNALS
        }
        try:
            yield
        finally:
            for sig, handler in original_handlers.items():
                signal.signal(sig, handler)

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            self.state = ServerState.SERVING
            logger.info("Server started on http://localhost:%d", self.config.port)

    def handle_exit(self, sig, frame) -> None:
        if self.state is ServerState.SERVING:
            self.state = ServerState.SHUTTING_DOWN
            logger.info("Shutting down the server...")
        super().handle_exit(sig, frame)

    async def shutdown(self, sockets: list[socket.socket] | None = None) -> None:
        self.state = ServerState.SHUTTING_DOWN
        started_at = time.monotonic()
        await super().shutdown(sockets=sockets)
        timeout = self.config.timeout_graceful_shutdown
        if self.force_exit or (
            timeout is not None and time.monotonic() - started_at >= timeout
        ):
            self.forced_shutdown = True
        self.state = ServerState.STOPPED


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_config(app, host: str = HOST, port: int = PORT) -> uvicorn.Config:
    return uvicorn.Config(
        app,
        host=host,
        port=port,
        timeout_keep_alive=READ_TIMEOUT_SECONDS,
        timeout_graceful_shutdown=SHUTDOWN_TIMEOUT_SECONDS,
        access_log=False,
        log_config=None,
    )


def bind_socket(host: str = HOST, port: int = PORT) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as err:
        sock.close()
        logger.critical("Failed to bind %s:%d: %s", host, port, err)
        raise SystemExit(1) from err
    return sock


def main() -> None:
    configure_logging()
    server = CatalogServer(build_config(create_app(), host=HOST, port=PORT))
    sock = bind_socket(server.config.host, server.config.port)
    try:
        server.run(sockets=[sock])
    except SystemExit as exc:
        # uvicorn exits with its own status when application startup fails.
        logger.critical("Server failed to start")
        raise SystemExit(1) from exc
    finally:
        sock.close()

    if not server.started:
        logger.critical("Server failed to start")
        sys.exit(1)
    if server.forced_shutdown:
        logger.critical(
            "Server Shutdown Failed: in-flight requests exceeded %ss",
            server.config.timeout_graceful_shutdown,
        )
        sys.exit(1)
    logger.info("Server exited gracefully")


if __name__ == "__main__":
    main()
