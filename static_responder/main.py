from __future__ import annotations

from fastapi import FastAPI, Request as HTTPRequest, Response as HTTPResponse

from .models import Request
from .routes import build_route_table
from .table import RouteTable

METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def request_path(request: HTTPRequest) -> str:
    """Path as sent on the wire, still percent-encoded, without the query."""
    raw_path = request.scope.get("raw_path")
    if raw_path is None:
        return request.url.path
    return raw_path.decode("latin-1").split("?", 1)[0]


def create_app(table: RouteTable) -> FastAPI:
    """Build an ASGI app that answers every request from ``table``."""
    app = FastAPI(title="Static Route Responder", version="1.0.0")

    # A single catch-all keeps matching in the table: exact path, no redirects.
    @app.api_route("/{full_path:path}", methods=METHODS, include_in_schema=False)
    def dispatch(request: HTTPRequest, full_path: str) -> HTTPResponse:
        response = table.handle(Request(method=request.method, path=request_path(request)))
        return HTTPResponse(
            content=response.encode(),
            status_code=response.status,
            media_type=response.media_type,
        )

    return app


def create_default_app() -> FastAPI:
    """App factory for ``uvicorn static_responder.main:create_default_app --factory``."""
    return create_app(build_route_table())
