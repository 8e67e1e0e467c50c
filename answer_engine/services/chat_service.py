"""Chat service layer for the embeddable website chatbot.

Handles:
- Chatbot lookup for the public widget (by siteId or domain)
- Session creation with the chatbot's greeting
- Visitor message storage (user + assistant)
- Filing every successful AI answer as a pending AEO content item
"""
import logging
import re
import secrets
import string
import time
from typing import Any, Callable, Optional

from sqlmodel import Session, select

from answer_engine.core.errors import (
    ConfigurationError,
    InternalError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from answer_engine.models.aeo_content import AeoContent
from answer_engine.models.chatbot import Chatbot
from answer_engine.models.conversation import ChatMessage, ChatSession
from answer_engine.models.website import CompanyProfile, Website
from answer_engine.services import aeo_service
from answer_engine.services.llm_responder import LLMResponder

logger = logging.getLogger(__name__)

FALLBACK_REPLY = (
    "I'm sorry, but I'm having trouble processing your request at the moment. "
    "Please try again later or contact support for assistance."
)
FALLBACK_ERROR = "AI service temporarily unavailable"


def normalize_domain(domain: str) -> str:
    """Strip scheme, leading ``www.`` and any path from a domain or URL."""
    bare = re.sub(r"^(https?://)?(www\.)?", "", domain.strip(), flags=re.IGNORECASE)
    return bare.split("/")[0]


def domain_candidates(domain: str) -> list[str]:
    """Spellings a website's domain may have been registered under."""
    bare = re.sub(r"^www\.", "", domain.strip(), flags=re.IGNORECASE)
    return [
        bare,
        f"www.{bare}",
        f"https://{bare}",
        f"http://{bare}",
        f"https://www.{bare}",
        f"http://www.{bare}",
    ]


def generate_visitor_id() -> str:
    alphabet = string.ascii_lowercase + string.digits
    suffix = "".join(secrets.choice(alphabet) for _ in range(8))
    return f"visitor_{int(time.time() * 1000)}_{suffix}"


def build_company_context(profile: CompanyProfile, website: Optional[Website]) -> str:
    """Render the company profile as the context blob handed to the responder."""
    lines = [
        f"Company Name: {profile.company_name}",
        f"Industry: {profile.industry}",
        f"Target Audience: {profile.target_audience}",
        f"Brand Voice: {profile.brand_voice}",
        f"Services/Products: {profile.services}",
        f"Value Proposition: {profile.value_proposition}",
    ]
    if website:
        lines.append(f"Website: {website.domain}")
    return "\n".join(lines)


class ChatService:
    """Service layer for visitor chat operations."""

    def __init__(self, responder_provider: Callable[[], LLMResponder]):
        """
        Initialize chat service.

        Args:
            responder_provider: Returns the LLM responder; may raise
                ConfigurationError when no API key is configured
        """
        self.responder_provider = responder_provider

    def find_public_chatbot(
        self,
        session: Session,
        domain: Optional[str] = None,
        site_id: Optional[str] = None,
    ) -> tuple[Chatbot, Website]:
        """
        Resolve the active chatbot an embed script should load.

        siteId is matched first; otherwise the domain is tried under its
        common spellings. The most recently updated active chatbot wins.

        Raises:
            ValidationError: If neither domain nor site_id is given
            NotFoundError: If no website or active chatbot matches
        """
        if not domain and not site_id:
            raise ValidationError("Either domain or siteId parameter is required")

        website = None
        if site_id:
            website = session.exec(
                select(Website).where(Website.site_id == site_id)
            ).first()

        if not website and domain:
            for candidate in domain_candidates(domain):
                website = session.exec(
                    select(Website).where(Website.domain == candidate)
                ).first()
                if website:
                    break

        if not website:
            logger.info(f"No website found for siteId={site_id!r} domain={domain!r}")
            raise NotFoundError("Chatbot not found")

        chatbot = session.exec(
            select(Chatbot)
            .where(Chatbot.website_id == website.id, Chatbot.status == "active")
            .order_by(Chatbot.updated_at.desc(), Chatbot.id.desc())
        ).first()

        if not chatbot:
            logger.info(f"No active chatbot for website {website.id}")
            raise NotFoundError("Chatbot not found")

        return chatbot, website

    def create_session(
        self,
        session: Session,
        chatbot_id: int,
        visitor_id: Optional[str] = None,
        visitor_email: Optional[str] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> tuple[ChatSession, ChatMessage]:
        """
        Open a session on an active chatbot and store its greeting.

        Returns:
            Tuple of (chat_session, greeting_message)

        Raises:
            NotFoundError: If no active chatbot has this id
        """
        chatbot = session.exec(
            select(Chatbot).where(Chatbot.id == chatbot_id, Chatbot.status == "active")
        ).first()
        if not chatbot:
            logger.warning(f"Chatbot {chatbot_id} not found or inactive")
            raise NotFoundError("Chatbot not found")

        chat_session = ChatSession(
            chatbot_id=chatbot.id,
            visitor_id=visitor_id or generate_visitor_id(),
            visitor_email=visitor_email,
            session_metadata=metadata,
        )
        session.add(chat_session)
        session.flush()

        greeting = chatbot.initial_message
        if not greeting:
            website = session.get(Website, chatbot.website_id)
            name = normalize_domain(website.domain) if website else "our website"
            greeting = f"Hi there! How can I help you with information about {name}?"

        first_message = ChatMessage(
            session_id=chat_session.id,
            role="assistant",
            content=greeting,
        )
        session.add(first_message)
        session.commit()
        session.refresh(chat_session)
        session.refresh(first_message)

        logger.info(f"Created chat session {chat_session.id} for chatbot {chatbot.id}")
        return chat_session, first_message

    def get_messages(self, session: Session, session_id: int) -> list[ChatMessage]:
        """
        Get all messages of a session in the order they were sent.

        Raises:
            NotFoundError: If the session does not exist
        """
        if not session.get(ChatSession, session_id):
            raise NotFoundError("Chat session not found")

        statement = (
            select(ChatMessage)
            .where(ChatMessage.session_id == session_id)
            .order_by(ChatMessage.sent_at, ChatMessage.id)
        )
        return list(session.exec(statement).all())

    def post_message(
        self,
        session: Session,
        session_id: int,
        text: Optional[str],
    ) -> tuple[ChatMessage, Optional[AeoContent], Optional[str]]:
        """
        Process a visitor message.

        Flow:
        1. Store user message (flushed, not yet committed)
        2. Load the chatbot owner's company profile
        3. Build the company context and call the LLM responder
        4. On success store the reply and a pending AEO item, commit once
        5. On responder failure store the fallback reply, no AEO item

        Returns:
            Tuple of (assistant_message, aeo_item, error_message)
            - aeo_item: None when the fallback reply was used
            - error_message: None if success, error detail if fallback

        Raises:
            ValidationError: If the message is empty
            NotFoundError: If the session does not exist
            InternalError: If the owner has no company profile
        """
        if not text or not text.strip():
            raise ValidationError("Message content is required")

        chat_session = session.get(ChatSession, session_id)
        if not chat_session:
            logger.warning(f"Chat session {session_id} not found")
            raise NotFoundError("Chat session not found")

        chatbot = session.get(Chatbot, chat_session.chatbot_id)
        if not chatbot:
            raise InternalError("Chatbot for this session no longer exists")

        try:
            user_msg = self._store_message(session, session_id, "user", text)

            profile = session.exec(
                select(CompanyProfile).where(CompanyProfile.user_id == chatbot.user_id)
            ).first()
            if not profile:
                # Keep the visitor's message even though it cannot be answered
                session.commit()
                logger.error(f"No company profile found for user {chatbot.user_id}")
                raise InternalError("Company information not found")

            website = session.get(Website, chatbot.website_id)
            context = build_company_context(profile, website)

            try:
                responder = self.responder_provider()
                answer = responder.respond(text, context)
            except (UpstreamError, ConfigurationError) as e:
                logger.error(f"AI error in chat session {session_id}: {e.message}")
                fallback = self._store_message(session, session_id, "assistant", FALLBACK_REPLY)
                session.commit()
                session.refresh(fallback)
                return fallback, None, FALLBACK_ERROR

            assistant_msg = self._store_message(session, session_id, "assistant", answer)
            item = aeo_service.create_pending_item(
                session,
                user_id=chatbot.user_id,
                website_id=chatbot.website_id,
                question=text,
                answer=answer,
                chat_message_id=user_msg.id,
            )
            session.commit()
            session.refresh(assistant_msg)
            session.refresh(item)

            logger.info(
                f"Chat message processed: session={session_id}, "
                f"message_id={user_msg.id}, response_id={assistant_msg.id}, aeo_id={item.id}"
            )
            return assistant_msg, item, None

        except InternalError:
            raise
        except Exception:
            session.rollback()
            raise

    def _store_message(
        self, session: Session, session_id: int, role: str, content: str
    ) -> ChatMessage:
        message = ChatMessage(session_id=session_id, role=role, content=content)
        session.add(message)
        session.flush()
        return message
