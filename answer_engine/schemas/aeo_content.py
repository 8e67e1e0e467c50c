"""Request and response models for AEO moderation."""
from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from answer_engine.schemas.base import CamelModel


class AeoContentRead(CamelModel):
    id: int
    chat_message_id: Optional[int] = None
    user_id: int
    website_id: int
    question: str
    answer: str
    status: str
    faq_schema: Optional[dict[str, Any]] = Field(default=None, alias="schema")
    added_to_website: bool
    created_at: datetime
    updated_at: datetime


class AeoContentPublished(AeoContentRead):
    message: str


class AeoContentUpdate(CamelModel):
    answer: Optional[str] = None
