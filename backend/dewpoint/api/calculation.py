"""
API route that feeds ASGI requests through the request-line pipeline.

A single catch-all route rebuilds the HTTP request line from the ASGI
scope so that routing, parsing and error texts are identical to the raw TCP
server.
"""

from fastapi import APIRouter, Request, Response

from dewpoint.engine.handler import handle_request_line

router = APIRouter(tags=["dewpoint"])

_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def request_line_from_scope(request: Request) -> str:
    """Rebuild "<METHOD> <raw path>[?query] HTTP/<version>" from the ASGI scope."""
    scope = request.scope
    raw_path = scope.get("raw_path")
    path = raw_path.decode("latin-1") if raw_path else request.url.path
    query = scope.get("query_string", b"")
    if query:
        path = f"{path}?{query.decode('latin-1')}"
    version = scope.get("http_version", "1.1")
    return f"{request.method} {path} HTTP/{version}"


@router.api_route("/{path:path}", methods=_METHODS, include_in_schema=False)
async def calculate(request: Request) -> Response:
    """Resolve dew point (and mould index, for the generic endpoint) from the path."""
    variant = request.app.state.variant
    result = handle_request_line(request_line_from_scope(request), variant)
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type="application/json",
    )
