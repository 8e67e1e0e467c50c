"""Request and response models for legacy campaigns."""
from datetime import datetime
from typing import Optional

from answer_engine.schemas.base import CamelModel


class CampaignCreate(CamelModel):
    title: str
    type: str
    status: str
    open_rate: Optional[str] = None
    click_rate: Optional[str] = None
    sent_date: Optional[str] = None


class CampaignUpdate(CamelModel):
    title: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    open_rate: Optional[str] = None
    click_rate: Optional[str] = None
    sent_date: Optional[str] = None


class CampaignRead(CampaignCreate):
    id: int
    user_id: int
    created_at: datetime
    updated_at: datetime
