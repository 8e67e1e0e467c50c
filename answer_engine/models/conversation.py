"""ChatSession and ChatMessage SQLModel definitions for the website widget.

Models:
- ChatSession: one visitor's conversation with a chatbot
- ChatMessage: individual message in a session, ordered by sent_at
"""
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from answer_engine.core.clock import utc_now


class ChatSession(SQLModel, table=True):
    """
    Chat session entity.

    Visitors are anonymous: ownership is derived from the chatbot, not
    stored on the session.
    """
    __tablename__ = "chat_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    chatbot_id: int = Field(foreign_key="chatbots.id", index=True, nullable=False)
    visitor_id: str = Field(index=True, max_length=255)
    visitor_email: Optional[str] = Field(default=None, max_length=255)
    # "metadata" is reserved on declarative classes, hence the attribute name
    session_metadata: Optional[dict[str, Any]] = Field(
        default=None, sa_column=Column("metadata", JSON, nullable=True)
    )
    started_at: datetime = Field(default_factory=utc_now)
    ended_at: Optional[datetime] = Field(default=None)


class ChatMessage(SQLModel, table=True):
    """
    Message entity for chat sessions.

    Role: "user" or "assistant"
    """
    __tablename__ = "chat_messages"

    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: int = Field(foreign_key="chat_sessions.id", index=True, nullable=False)
    role: str = Field(max_length=20)  # "user" or "assistant"
    content: str = Field()
    sent_at: datetime = Field(default_factory=utc_now)
