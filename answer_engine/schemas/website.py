"""Request and response models for websites, company profiles and chatbots."""
from datetime import datetime
from typing import Optional

from answer_engine.schemas.base import CamelModel


class WebsiteCreate(CamelModel):
    domain: str


class WebsiteUpdate(CamelModel):
    domain: Optional[str] = None
    is_active: Optional[bool] = None


class WebsiteRead(CamelModel):
    id: int
    user_id: int
    domain: str
    site_id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CompanyProfileCreate(CamelModel):
    company_name: str
    industry: str
    target_audience: str
    brand_voice: str
    services: str
    value_proposition: str


class CompanyProfileUpdate(CamelModel):
    company_name: Optional[str] = None
    industry: Optional[str] = None
    target_audience: Optional[str] = None
    brand_voice: Optional[str] = None
    services: Optional[str] = None
    value_proposition: Optional[str] = None


class CompanyProfileRead(CompanyProfileCreate):
    id: int
    user_id: int
    created_at: datetime
    updated_at: datetime


class ChatbotCreate(CamelModel):
    website_id: int
    name: str
    primary_color: Optional[str] = None
    position: Optional[str] = None
    initial_message: Optional[str] = None
    collect_email: Optional[bool] = None
    status: Optional[str] = None


class ChatbotUpdate(CamelModel):
    name: Optional[str] = None
    primary_color: Optional[str] = None
    position: Optional[str] = None
    initial_message: Optional[str] = None
    collect_email: Optional[bool] = None
    status: Optional[str] = None


class ChatbotRead(CamelModel):
    id: int
    user_id: int
    website_id: int
    name: str
    primary_color: str
    position: str
    initial_message: Optional[str] = None
    collect_email: bool
    status: str
    created_at: datetime
    updated_at: datetime
