"""User SQLModel definition.

Users are the business owners who curate AEO content. Credentials and
sessions are managed outside this service; rows here anchor ownership.
"""
from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from answer_engine.core.clock import utc_now


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(index=True, unique=True, max_length=255)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
