"""SQLModel table definitions."""
from answer_engine.models.aeo_content import AeoContent, AeoStatus
from answer_engine.models.campaign import Campaign
from answer_engine.models.chatbot import Chatbot
from answer_engine.models.conversation import ChatMessage, ChatSession
from answer_engine.models.user import User
from answer_engine.models.website import CompanyProfile, Website

__all__ = [
    "AeoContent",
    "AeoStatus",
    "Campaign",
    "ChatMessage",
    "ChatSession",
    "Chatbot",
    "CompanyProfile",
    "User",
    "Website",
]
