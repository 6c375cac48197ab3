from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.responses import PrettyJSONResponse

AVAILABLE_ROUTES = [
    "POST /api/messages",
    "GET /api/messages (requires ADMIN_TOKEN)",
    "GET /admin (requires ADMIN_TOKEN)",
]


class ContactAPIError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class ClientInputError(ContactAPIError):
    """Malformed submission: bad JSON, wrong shape or a field out of bounds."""
    status_code = 400


class UnsupportedMediaTypeError(ClientInputError):
    status_code = 415


class AuthorizationError(ContactAPIError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class RouteNotFoundError(ContactAPIError):
    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.message, "available_routes": AVAILABLE_ROUTES}


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(ContactAPIError)
    async def contact_api_error_handler(request: Request, exc: ContactAPIError):
        return PrettyJSONResponse(exc.to_dict(), status_code=exc.status_code)

    # Unknown paths and known paths hit with the wrong method both get the route catalogue
    @app.exception_handler(StarletteHTTPException)
    async def route_not_found_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            not_found = RouteNotFoundError()
            return PrettyJSONResponse(not_found.to_dict(), status_code=not_found.status_code)
        return await http_exception_handler(request, exc)
