"""Website and CompanyProfile SQLModel definitions.

Models:
- Website: a site connected by a user; ``site_id`` is the public key the
  embed script sends back
- CompanyProfile: one per user, the context the chatbot answers from
"""
from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from answer_engine.core.clock import utc_now


class Website(SQLModel, table=True):
    """
    Website entity.

    Ownership: Each website belongs to exactly one user via user_id.
    """
    __tablename__ = "websites"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True, nullable=False)
    domain: str = Field(index=True, max_length=255)
    site_id: str = Field(unique=True, index=True, max_length=64)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class CompanyProfile(SQLModel, table=True):
    __tablename__ = "company_profiles"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True, unique=True, nullable=False)
    company_name: str = Field(max_length=255)
    industry: str = Field()
    target_audience: str = Field()
    brand_voice: str = Field()
    services: str = Field()
    value_proposition: str = Field()
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
