"""Process entrypoint that serves the site with uvicorn.

The server stops accepting connections on SIGINT/SIGTERM and gives in-flight
requests a fixed grace period to finish; a watchdog force-exits with status 1
if shutdown takes longer. Any uncaught exception, on any thread or on the event
loop, is logged and ends the process with status 1.

Usage:
    python -m dryclean.server [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import signal
import sys
import threading
from types import FrameType, TracebackType
from typing import Any

import uvicorn
from fastapi import FastAPI

from dryclean.api.api_config import ApiConfig, get_api_config
from dryclean.api.app import create_app
from dryclean.common.logging import configure_logging

LOGGER = logging.getLogger("server")


def _fatal_exit(message: str, exc_info: Any = None) -> None:
    LOGGER.critical(message, exc_info=exc_info)
    logging.shutdown()
    os._exit(1)


def _handle_uncaught(
    exc_type: type[BaseException],
    exc: BaseException,
    tb: TracebackType | None,
) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc, tb)
        return
    _fatal_exit("Uncaught exception", exc_info=(exc_type, exc, tb))


def _handle_thread_exception(args: threading.ExceptHookArgs) -> None:
    if args.exc_type is SystemExit:
        return
    _fatal_exit(
        f"Uncaught exception in thread {getattr(args.thread, 'name', '?')}",
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
    )


def _handle_loop_exception(_: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    exc = context.get("exception")
    exc_info = (type(exc), exc, exc.__traceback__) if exc is not None else None
    _fatal_exit(f"Unhandled event loop error: {context.get('message', 'unknown')}", exc_info=exc_info)


def install_fatal_error_hooks() -> None:
    """Treat any uncaught error in the process as fatal."""

    sys.excepthook = _handle_uncaught
    threading.excepthook = _handle_thread_exception


class GracefulServer(uvicorn.Server):
    """uvicorn server with a hard deadline on graceful shutdown."""

    def __init__(self, config: uvicorn.Config, *, grace_seconds: float) -> None:
        super().__init__(config)
        self.grace_seconds = grace_seconds
        self._force_exit_timer: threading.Timer | None = None

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        if self._force_exit_timer is None:
            LOGGER.info(
                "Received %s, closing server gracefully (grace period %ss)",
                signal.Signals(sig).name,
                self.grace_seconds,
            )
            timer = threading.Timer(self.grace_seconds, self._force_exit)
            timer.daemon = True
            timer.start()
            self._force_exit_timer = timer
        super().handle_exit(sig, frame)

    def _force_exit(self) -> None:
        LOGGER.error("Forced shutdown after %ss timeout", self.grace_seconds)
        logging.shutdown()
        os._exit(1)

    def cancel_force_exit(self) -> None:
        if self._force_exit_timer is not None:
            self._force_exit_timer.cancel()


def build_server(app: FastAPI, config: ApiConfig) -> GracefulServer:
    uvicorn_config = uvicorn.Config(
        app=app,
        host=config.host,
        port=config.port,
        reload=False,
        log_config=None,
        timeout_graceful_shutdown=config.shutdown_grace_seconds,
    )
    return GracefulServer(uvicorn_config, grace_seconds=config.shutdown_grace_seconds)


async def serve(server: GracefulServer) -> None:
    asyncio.get_running_loop().set_exception_handler(_handle_loop_exception)
    await server.serve()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the Touch of Elegance site backend")
    parser.add_argument("--host", default=None, help="Override the HOST setting")
    parser.add_argument("--port", type=int, default=None, help="Override the PORT setting")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging()
    install_fatal_error_hooks()

    config = get_api_config()
    overrides = {key: value for key, value in (("host", args.host), ("port", args.port)) if value}
    if overrides:
        config = config.model_copy(update=overrides)

    app = create_app(config)
    server = build_server(app, config)

    LOGGER.info("Server is running on %s:%s", config.host, config.port)
    LOGGER.info("Environment: %s", config.environment)
    LOGGER.info("Visit http://localhost:%s", config.port)

    try:
        asyncio.run(serve(server))
    except KeyboardInterrupt:
        pass
    finally:
        server.cancel_force_exit()
        LOGGER.info("Server closed")


if __name__ == "__main__":
    main()
