"""AeoContent SQLModel definition.

One captured question/answer pair moving through moderation:
pending -> approved | rejected, approved -> published.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from sqlalchemy import JSON, Column, ForeignKey, Integer
from sqlmodel import Field, SQLModel

from answer_engine.core.clock import utc_now


class AeoStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    PUBLISHED = "published"


class AeoContent(SQLModel, table=True):
    """
    AEO content item.

    Ownership: user_id/website_id are copied from the originating
    chatbot when the item is created. website_id carries no database
    constraint; publish re-checks that the website still exists.
    """
    __tablename__ = "aeo_content"

    id: Optional[int] = Field(default=None, primary_key=True)
    chat_message_id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            Integer,
            ForeignKey("chat_messages.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    user_id: int = Field(foreign_key="users.id", index=True, nullable=False)
    website_id: int = Field(index=True, nullable=False)
    question: str = Field()
    answer: str = Field()
    status: str = Field(default=AeoStatus.PENDING.value, max_length=20)
    faq_schema: Optional[dict[str, Any]] = Field(
        default=None, sa_column=Column("schema", JSON, nullable=True)
    )
    added_to_website: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
