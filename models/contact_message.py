# backend/models/contact_message.py
from typing import Optional
from datetime import datetime
from sqlalchemy import func
from sqlmodel import Field, SQLModel

__all__ = ["ContactMessage"]

NAME_MAX_LENGTH = 120
EMAIL_MAX_LENGTH = 320
SUBJECT_MAX_LENGTH = 200
MESSAGE_MAX_LENGTH = 5000


class ContactMessage(SQLModel, table=True):
    """A single contact form submission. Rows are written once and never updated."""
    __tablename__ = "contact_messages"
    # AUTOINCREMENT keeps SQLite from handing out an id twice
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=NAME_MAX_LENGTH)
    email: str = Field(max_length=EMAIL_MAX_LENGTH, index=True)
    subject: Optional[str] = Field(default=None, max_length=SUBJECT_MAX_LENGTH)
    message: str = Field(max_length=MESSAGE_MAX_LENGTH)
    ip: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: Optional[datetime] = Field(
        default=None,
        nullable=False,
        sa_column_kwargs={"server_default": func.current_timestamp()},
    )
