from __future__ import annotations

import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Type
from urllib.parse import urlsplit

from .models import Request
from .table import RouteTable

logger = logging.getLogger(__name__)


def make_handler(table: RouteTable) -> Type[BaseHTTPRequestHandler]:
    class Handler(BaseHTTPRequestHandler):
        server_version = "StaticResponder/1.0"

        def log_message(self, format: str, *args) -> None:  # noqa: A003 - keep default signature
            logger.info("%s - %s", self.address_string(), format % args)

        def dispatch(self) -> None:
            path = urlsplit(self.path).path
            response = table.handle(Request(method=self.command, path=path))
            body = response.encode()
            self.send_response(response.status)
            self.send_header("Content-Type", f"{response.media_type}; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            if self.command != "HEAD":
                self.wfile.write(body)

        # http.server API uses camelcase
        do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = do_OPTIONS = do_HEAD = dispatch  # noqa: N815

    return Handler


def make_server(table: RouteTable, host: str, port: int) -> ThreadingHTTPServer:
    return ThreadingHTTPServer((host, port), make_handler(table))


def run(table: RouteTable, host: str, port: int) -> None:
    server = make_server(table, host, port)
    logger.info("Server is running on port %s", server.server_address[1])
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
