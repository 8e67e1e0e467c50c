"""Request and response models for the public widget API."""
from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from answer_engine.schemas.base import CamelModel


class PublicChatbotConfig(CamelModel):
    """Chatbot configuration exposed to the embed script."""
    id: int
    name: str
    primary_color: str
    position: str
    initial_message: str
    collect_email: bool
    website_domain: str


class ChatSessionCreate(CamelModel):
    chatbot_id: int
    visitor_id: Optional[str] = None
    visitor_email: Optional[str] = None
    url: Optional[str] = None


class ChatMessageCreate(CamelModel):
    message: Optional[str] = None


class ChatMessageRead(CamelModel):
    id: int
    session_id: int
    role: str
    content: str
    sent_at: datetime


class ChatSessionRead(CamelModel):
    id: int
    chatbot_id: int
    visitor_id: str
    visitor_email: Optional[str] = None
    session_metadata: Optional[dict[str, Any]] = Field(default=None, alias="metadata")
    started_at: datetime
    ended_at: Optional[datetime] = None
    message: Optional[ChatMessageRead] = None


class ChatReply(CamelModel):
    """Reply to a visitor message; ``error`` is set when the fallback was used."""
    message: ChatMessageRead
    session: int
    error: Optional[str] = None
