"""
Per-response CORS headers.

Preflights always get 204. A caller whose origin is not the configured one
gets every header except ``Access-Control-Allow-Origin``.
"""
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

ALLOW_METHODS = "GET,POST,OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization, X-Admin-Token"
MAX_AGE_SECONDS = 86400

ADMIN_VIEW_PATH = "/admin"


def build_cors_headers(request_origin: Optional[str], allowed_origin: Optional[str]) -> dict:
    allowed_origin = allowed_origin or "*"
    if allowed_origin == "*":
        origin = "*"
    elif request_origin == allowed_origin:
        origin = request_origin
    else:
        origin = None

    headers = {}
    if origin:
        headers["Access-Control-Allow-Origin"] = origin
    headers["Vary"] = "Origin"
    headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
    headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
    headers["Access-Control-Max-Age"] = str(MAX_AGE_SECONDS)
    return headers


def is_admin_view(request: Request) -> bool:
    # Opened directly in a browser, never fetched cross-origin
    return request.method == "GET" and request.url.path == ADMIN_VIEW_PATH


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        settings = request.app.state.settings
        cors_headers = build_cors_headers(request.headers.get("origin"), settings.ALLOWED_ORIGIN)

        if request.method == "OPTIONS":
            return Response(status_code=204, headers=cors_headers)

        response = await call_next(request)
        if not is_admin_view(request):
            response.headers.update(cors_headers)
        return response
