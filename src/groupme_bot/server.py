"""
Standalone HTTP server for container hosting.

Same routes and status codes as the Lambda handler; all bot logic lives in
the dispatcher.
"""

from __future__ import annotations

import logging
import os
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from .config import Settings, load_settings
from .dispatcher import CallbackDispatcher, build_dispatcher
from .errors import BotError, http_status

logger = logging.getLogger(__name__)

CALLBACK_PATHS = ("/", "/callback")


class BotRequestHandler(BaseHTTPRequestHandler):
    dispatcher: CallbackDispatcher

    def _reply(self, status: int, text: str) -> None:
        body = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _route(self) -> str:
        return self.path.split("?", 1)[0]

    def _scheduled(self) -> None:
        logger.info("Received scheduled request from %s", self.client_address[0])
        try:
            self.dispatcher.handle_scheduled()
        except BotError as e:
            logger.error("Error handling scheduled suggestion: %s", e)
            self._reply(http_status(e), "Internal server error")
            return
        except Exception:
            logger.exception("Unhandled error in scheduled suggestion")
            self._reply(500, "Internal server error")
            return
        self._reply(200, "Weekly suggestion sent")

    def do_GET(self) -> None:  # noqa: N802
        route = self._route()
        if route == "/health":
            logger.debug("Health check request from %s", self.client_address[0])
            self._reply(200, "OK")
        elif route == "/scheduled":
            self._scheduled()
        elif route in CALLBACK_PATHS:
            logger.info("Invalid method: %s", self.command)
            self._reply(405, "Method not allowed")
        else:
            self._reply(404, "Not found")

    def do_POST(self) -> None:  # noqa: N802
        route = self._route()
        if route == "/scheduled":
            self._scheduled()
            return
        if route not in CALLBACK_PATHS:
            self._reply(404, "Not found")
            return

        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            logger.error("Invalid Content-Length: %s", self.headers.get("Content-Length"))
            self._reply(400, "Bad request")
            return
        body = self.rfile.read(length) if length > 0 else b""
        try:
            result = self.dispatcher.handle_callback(body)
        except BotError as e:
            status = http_status(e)
            logger.error("Error handling callback (%s): %s", type(e).__name__, e)
            self._reply(status, "Bad request" if status == 400 else "Internal server error")
            return
        except Exception:
            logger.exception("Unhandled error in callback")
            self._reply(500, "Internal server error")
            return
        logger.debug("Callback handled: %s", result.action)
        self._reply(200, "OK")

    def _not_allowed(self) -> None:
        self._reply(405, "Method not allowed")

    do_PUT = do_DELETE = do_PATCH = _not_allowed

    def log_message(self, format: str, *args) -> None:  # noqa: A002
        logger.debug("%s - %s", self.address_string(), format % args)


def make_server(settings: Settings, host: str = "") -> ThreadingHTTPServer:
    handler = type(
        "ConfiguredBotRequestHandler",
        (BotRequestHandler,),
        {"dispatcher": build_dispatcher(settings)},
    )
    return ThreadingHTTPServer((host, settings.port), handler)


def main() -> None:
    level_name = (os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()
    server = make_server(settings)
    logger.info("Starting server on port %s", settings.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
