import logging
import math
import re
from typing import List, Optional

from pydantic import ValidationError
from sqlmodel import Session, select

from core.errors import ClientInputError
from models.contact_message import ContactMessage
from schemas.contact_message import ContactMessageCreate

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50
MAX_LIMIT = 200
MAX_OFFSET = 10000
ADMIN_VIEW_LIMIT = 200

# plain decimal notation only; float() would also take "1_000" or non-ASCII digits
NUMBER_REGEX = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def clamp_number(value: Optional[str], fallback: int, minimum: int, maximum: int) -> int:
    """Parse a query value, falling back on junk and truncating fractions toward zero."""
    if value is None:
        return fallback
    value = value.strip()
    if not NUMBER_REGEX.fullmatch(value):
        return fallback
    parsed = float(value)
    if not math.isfinite(parsed):
        return fallback
    return max(minimum, min(maximum, math.trunc(parsed)))


def parse_submission(body) -> ContactMessageCreate:
    if not isinstance(body, dict):
        raise ClientInputError("Body must be a JSON object")
    try:
        return ContactMessageCreate.model_validate(body)
    except ValidationError as exc:
        # Only the first failing field is reported
        raise ClientInputError(exc.errors()[0]["msg"]) from exc


def create_message(
    session: Session,
    payload: ContactMessageCreate,
    ip: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> ContactMessage:
    message = ContactMessage(
        name=payload.name,
        email=payload.email,
        subject=payload.subject,
        message=payload.message,
        ip=ip or None,
        user_agent=user_agent or None,
    )
    session.add(message)
    session.commit()
    session.refresh(message)
    logger.info(f"Stored contact message {message.id}")
    return message


def list_messages(session: Session, limit: int, offset: int = 0) -> List[ContactMessage]:
    statement = (
        select(ContactMessage)
        .order_by(ContactMessage.id.desc())
        .offset(offset)
        .limit(limit)
    )
    return session.exec(statement).all()
