import hmac
import logging
from typing import Optional
from fastapi import Depends, Request

from core.config import Settings, get_settings
from core.errors import AuthorizationError

logger = logging.getLogger(__name__)


def _matches(candidate: Optional[str], expected: str) -> bool:
    if candidate is None:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def is_authorized(request: Request, admin_token: Optional[str]) -> bool:
    """
    True when the request presents the admin token as a bearer token, an
    ``X-Admin-Token`` header or a ``token`` query parameter.
    Without a configured token nothing is authorized.
    """
    if not admin_token:
        return False
    if _matches(request.headers.get("authorization"), f"Bearer {admin_token}"):
        return True
    if _matches(request.headers.get("x-admin-token"), admin_token):
        return True
    # first value wins when the parameter is repeated
    tokens = request.query_params.getlist("token")[:1]
    return _matches(tokens[0] if tokens else None, admin_token)


# Dependency for the JSON admin endpoints
def require_admin_token(request: Request, settings: Settings = Depends(get_settings)):
    if not is_authorized(request, settings.ADMIN_TOKEN):
        logger.warning(f"Rejected admin request to {request.url.path}")
        raise AuthorizationError()
