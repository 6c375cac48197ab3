import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request, status
from starlette.concurrency import run_in_threadpool
from sqlmodel import Session

from core.config import Settings, get_settings
from core.errors import ClientInputError, UnsupportedMediaTypeError
from database import get_session
from schemas.contact_message import ContactMessageCreated, ContactMessageList, ContactMessageRead
from services.auth_service import require_admin_token
from services.message_service import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MAX_OFFSET,
    clamp_number,
    create_message,
    list_messages,
    parse_submission,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/messages", response_model=ContactMessageCreated, status_code=status.HTTP_201_CREATED)
async def create_contact_message(
    request: Request,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type:
        raise UnsupportedMediaTypeError("Content-Type must be application/json")

    try:
        body = await request.json()
    except ValueError:
        raise ClientInputError("Invalid JSON body")

    try:
        payload = parse_submission(body)
    except ClientInputError as exc:
        logger.info(f"Rejected contact message: {exc.message}")
        raise

    # client address and agent come from headers only, never from the body;
    # the insert runs off the event loop
    message = await run_in_threadpool(
        create_message,
        session,
        payload,
        ip=request.headers.get(settings.TRUSTED_IP_HEADER),
        user_agent=request.headers.get("user-agent"),
    )
    return ContactMessageCreated(id=message.id)


@router.get(
    "/api/messages",
    response_model=ContactMessageList,
    dependencies=[Depends(require_admin_token)],
)
def list_contact_messages(
    limit: Optional[str] = Query(None),
    offset: Optional[str] = Query(None),
    session: Session = Depends(get_session),
):
    limit = clamp_number(limit, DEFAULT_LIMIT, 1, MAX_LIMIT)
    offset = clamp_number(offset, 0, 0, MAX_OFFSET)

    rows = list_messages(session, limit, offset)
    return ContactMessageList(
        results=[ContactMessageRead.model_validate(row) for row in rows],
        limit=limit,
        offset=offset,
    )
