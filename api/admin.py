import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlmodel import Session

from core.config import Settings, get_settings
from database import get_session
from services.auth_service import is_authorized
from services.html_renderer import render_messages_page
from services.message_service import ADMIN_VIEW_LIMIT, list_messages

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/admin", response_class=HTMLResponse)
def admin_view(
    request: Request,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    # Visited directly in a browser, so a bare text 401 rather than the JSON error
    if not is_authorized(request, settings.ADMIN_TOKEN):
        logger.warning("Rejected admin page request")
        return PlainTextResponse("Unauthorized", status_code=401)

    rows = list_messages(session, ADMIN_VIEW_LIMIT)
    return HTMLResponse(render_messages_page(rows))
