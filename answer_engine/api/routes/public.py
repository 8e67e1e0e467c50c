"""Public endpoints used by the embeddable chatbot widget.

Provides:
- GET /api/public/chatbot - Chatbot configuration by siteId or domain
- POST /api/public/chat-sessions - Open a chat session
- POST /api/public/chat-sessions/{session_id}/messages - Send a message
- GET /api/public/chat-sessions/{session_id}/messages - Session history
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status
from sqlmodel import Session

from answer_engine.core.deps import get_chat_service, get_db
from answer_engine.core.errors import ValidationError
from answer_engine.schemas.chat import (
    ChatMessageCreate,
    ChatMessageRead,
    ChatReply,
    ChatSessionCreate,
    ChatSessionRead,
    PublicChatbotConfig,
)
from answer_engine.services.chat_service import ChatService

router = APIRouter(prefix="/api/public", tags=["public"])


@router.get("/chatbot", response_model=PublicChatbotConfig)
def get_chatbot_config(
    domain: Optional[str] = None,
    site_id: Optional[str] = Query(default=None, alias="siteId"),
    session: Session = Depends(get_db),
    chat_service: ChatService = Depends(get_chat_service),
) -> PublicChatbotConfig:
    """Return the public configuration of the active chatbot for a site."""
    chatbot, website = chat_service.find_public_chatbot(session, domain=domain, site_id=site_id)
    return PublicChatbotConfig(
        id=chatbot.id,
        name=chatbot.name or "Chat with us",
        primary_color=chatbot.primary_color,
        position=chatbot.position,
        initial_message=chatbot.initial_message or "Hi there! How can I help you today?",
        collect_email=chatbot.collect_email,
        website_domain=website.domain,
    )


@router.post(
    "/chat-sessions",
    response_model=ChatSessionRead,
    status_code=status.HTTP_201_CREATED,
)
def create_chat_session(
    payload: ChatSessionCreate,
    request: Request,
    session: Session = Depends(get_db),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatSessionRead:
    """Open a session and return it with the chatbot's greeting."""
    metadata = {
        "url": payload.url,
        "userAgent": request.headers.get("user-agent"),
        "referrer": request.headers.get("referer"),
        "ipAddress": request.client.host if request.client else None,
    }
    chat_session, greeting = chat_service.create_session(
        session,
        chatbot_id=payload.chatbot_id,
        visitor_id=payload.visitor_id,
        visitor_email=payload.visitor_email,
        metadata=metadata,
    )
    return ChatSessionRead.from_row(chat_session, message=ChatMessageRead.from_row(greeting))


@router.post("/chat-sessions/{session_id}/messages", response_model=ChatReply)
def send_chat_message(
    session_id: int,
    payload: ChatMessageCreate,
    session: Session = Depends(get_db),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatReply:
    """
    Send a visitor message and return the assistant reply.

    AI failures still answer 200: the reply is a fallback apology and
    ``error`` describes the problem.
    """
    if not payload.message or not payload.message.strip():
        raise ValidationError("Message content is required")

    reply, _, error = chat_service.post_message(session, session_id, payload.message)
    return ChatReply(
        message=ChatMessageRead.from_row(reply),
        session=session_id,
        error=error,
    )


@router.get("/chat-sessions/{session_id}/messages", response_model=list[ChatMessageRead])
def list_chat_messages(
    session_id: int,
    session: Session = Depends(get_db),
    chat_service: ChatService = Depends(get_chat_service),
) -> list[ChatMessageRead]:
    messages = chat_service.get_messages(session, session_id)
    return [ChatMessageRead.from_row(message) for message in messages]
