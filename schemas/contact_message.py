import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError

from models.contact_message import (
    EMAIL_MAX_LENGTH,
    MESSAGE_MAX_LENGTH,
    NAME_MAX_LENGTH,
    SUBJECT_MAX_LENGTH,
)

EMAIL_REGEX = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

NAME_MIN_LENGTH = 2
MESSAGE_MIN_LENGTH = 3


class ContactMessageCreate(BaseModel):
    """
    Incoming contact form payload.

    Every field is coerced to a trimmed string before validation (missing or
    non-string values become ``""``). Fields are declared in the order they
    are checked, so the first entry of ``ValidationError.errors()`` is the
    first failing field.
    """
    name: str = ""
    email: str = ""
    subject: Optional[str] = ""
    message: str = ""

    class Config:
        validate_default = True

    @field_validator("name", "email", "subject", "message", mode="before")
    @classmethod
    def coerce_to_trimmed_text(cls, value):
        if isinstance(value, str):
            return value.strip()
        return ""

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
            raise PydanticCustomError("name_length", "name is required (2-120 chars)")
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        value = value.lower()
        if not value or not EMAIL_REGEX.fullmatch(value) or len(value) > EMAIL_MAX_LENGTH:
            raise PydanticCustomError("email_format", "email is invalid")
        return value

    @field_validator("subject")
    @classmethod
    def check_subject(cls, value: Optional[str]) -> Optional[str]:
        if value and len(value) > SUBJECT_MAX_LENGTH:
            raise PydanticCustomError("subject_length", "subject must be <= 200 chars")
        # omitted and blank subjects are both stored as NULL
        return value or None

    @field_validator("message")
    @classmethod
    def check_message(cls, value: str) -> str:
        if not MESSAGE_MIN_LENGTH <= len(value) <= MESSAGE_MAX_LENGTH:
            raise PydanticCustomError("message_length", "message is required (3-5000 chars)")
        return value


class ContactMessageCreated(BaseModel):
    ok: bool = True
    id: int


class ContactMessageRead(BaseModel):
    id: int
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    ip: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ContactMessageList(BaseModel):
    results: List[ContactMessageRead]
    limit: int
    offset: int
