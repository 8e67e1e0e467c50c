"""Chatbot SQLModel definition."""
from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from answer_engine.core.clock import utc_now

DEFAULT_PRIMARY_COLOR = "#4f46e5"
DEFAULT_POSITION = "bottom-right"


class Chatbot(SQLModel, table=True):
    """
    Chatbot widget configuration bound to one website.

    Only chatbots in ``active`` status are visible to the public widget API.
    """
    __tablename__ = "chatbots"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True, nullable=False)
    website_id: int = Field(foreign_key="websites.id", index=True, nullable=False)
    name: str = Field(max_length=255)
    primary_color: str = Field(default=DEFAULT_PRIMARY_COLOR, max_length=20)
    position: str = Field(default=DEFAULT_POSITION, max_length=20)
    initial_message: Optional[str] = Field(default=None)
    collect_email: bool = Field(default=True)
    status: str = Field(default="active", max_length=20)  # "active" or "inactive"
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
