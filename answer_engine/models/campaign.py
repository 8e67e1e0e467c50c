"""Campaign SQLModel definition (legacy marketing campaigns)."""
from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from answer_engine.core.clock import utc_now


class Campaign(SQLModel, table=True):
    __tablename__ = "campaigns"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True, nullable=False)
    title: str = Field(max_length=255)
    type: str = Field(max_length=50)
    status: str = Field(max_length=50)
    open_rate: Optional[str] = Field(default=None)
    click_rate: Optional[str] = Field(default=None)
    sent_date: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
