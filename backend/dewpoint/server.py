"""
Raw TCP server and process entry point.

Connections are accepted and handled one at a time on the serving thread.
Only the first request line is read; the response is written and the
connection closed. With no read timeout configured, a client that never
sends a line holds the server until it disconnects.
"""

import logging
import socketserver
from typing import Optional

import uvicorn

from dewpoint.config import ServerMode, Settings, load_settings
from dewpoint.engine.handler import handle_request_line
from dewpoint.engine.variants.base import EndpointVariant
from dewpoint.engine.variants.registry import get_variant
from dewpoint.main import create_app

logger = logging.getLogger(__name__)


def decode_request_line(raw: bytes) -> str:
    """Strip the trailing "\\n" and optional "\\r"; raises UnicodeDecodeError."""
    line = raw.decode("utf-8")
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class RequestLineHandler(socketserver.StreamRequestHandler):
    """Reads one request line, writes one response."""

    def handle(self) -> None:
        raw = self.rfile.readline()
        if not raw:
            logger.warning("Connection from %s closed before a request line", self.client_address)
            return
        try:
            line = decode_request_line(raw)
        except UnicodeDecodeError:
            logger.warning("Dropping connection from %s: request line is not UTF-8", self.client_address)
            return

        response = handle_request_line(line, self.server.variant)
        self.wfile.write(response.to_bytes())


class DewpointServer(socketserver.TCPServer):
    """Single-threaded TCP server bound to one endpoint variant."""

    allow_reuse_address = True

    def __init__(
        self,
        server_address: tuple[str, int],
        variant: EndpointVariant,
        read_timeout: Optional[float] = None,
    ):
        self.variant = variant
        self.read_timeout = read_timeout
        super().__init__(server_address, RequestLineHandler)

    def get_request(self):
        conn, addr = super().get_request()
        conn.settimeout(self.read_timeout)
        return conn, addr

    def handle_error(self, request, client_address) -> None:
        logger.exception("Error while handling connection from %s", client_address)


def create_server(settings: Settings) -> DewpointServer:
    return DewpointServer(
        (settings.host, settings.port),
        get_variant(settings.variant),
        read_timeout=settings.read_timeout,
    )


def serve(settings: Settings) -> None:
    """Serve forever with the configured backend."""
    if settings.server == ServerMode.ASGI:
        uvicorn.run(
            create_app(settings.variant),
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
        return

    with create_server(settings) as server:
        logger.info(
            "Listening on %s:%d (variant=%s)",
            settings.host,
            server.server_address[1],
            settings.variant.value,
        )
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Shutting down")


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    serve(settings)


if __name__ == "__main__":
    main()
