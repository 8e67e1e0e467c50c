"""Website, company profile and chatbot configuration services.

All functions scope lookups to the owning user; another user's record
is reported as not found.
"""
import logging
import secrets

from sqlmodel import Session, select

from answer_engine.core.clock import utc_now
from answer_engine.core.errors import NotFoundError, ValidationError
from answer_engine.models.aeo_content import AeoContent
from answer_engine.models.chatbot import Chatbot
from answer_engine.models.conversation import ChatMessage, ChatSession
from answer_engine.models.website import CompanyProfile, Website
from answer_engine.schemas.website import (
    ChatbotCreate,
    ChatbotUpdate,
    CompanyProfileCreate,
    CompanyProfileUpdate,
    WebsiteCreate,
    WebsiteUpdate,
)

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_MESSAGE = "Hello! How can I help you with information about our website?"


def generate_site_id() -> str:
    return f"site_{secrets.token_hex(6)}"


# Websites

def list_websites(session: Session, user_id: int) -> list[Website]:
    statement = select(Website).where(Website.user_id == user_id).order_by(Website.id)
    return list(session.exec(statement).all())


def get_website(session: Session, user_id: int, website_id: int) -> Website:
    statement = select(Website).where(Website.id == website_id, Website.user_id == user_id)
    website = session.exec(statement).first()
    if not website:
        raise NotFoundError("Website not found")
    return website


def create_website(session: Session, user_id: int, data: WebsiteCreate) -> Website:
    """
    Register a website and give it a default active chatbot.

    Raises:
        ValidationError: If the user already registered this domain
    """
    domain = data.domain.strip()
    if not domain:
        raise ValidationError("Domain is required")

    existing = session.exec(
        select(Website).where(Website.user_id == user_id, Website.domain == domain)
    ).first()
    if existing:
        raise ValidationError("You already have a website with this domain")

    website = Website(user_id=user_id, domain=domain, site_id=generate_site_id())
    session.add(website)
    session.flush()

    chatbot = Chatbot(
        user_id=user_id,
        website_id=website.id,
        name=f"{domain} Chatbot",
        initial_message=DEFAULT_INITIAL_MESSAGE,
        status="active",
    )
    session.add(chatbot)
    session.commit()
    session.refresh(website)

    logger.info(f"Created website {website.id} ({domain}) with chatbot {chatbot.id}")
    return website


def update_website(
    session: Session, user_id: int, website_id: int, data: WebsiteUpdate
) -> Website:
    """
    Update a website the user owns.

    Raises:
        ValidationError: If the new domain is blank or already registered
            on another of the user's websites
    """
    website = get_website(session, user_id, website_id)
    if data.domain is not None:
        domain = data.domain.strip()
        if not domain:
            raise ValidationError("Domain is required")
        existing = session.exec(
            select(Website).where(
                Website.user_id == user_id,
                Website.domain == domain,
                Website.id != website_id,
            )
        ).first()
        if existing:
            raise ValidationError("You already have a website with this domain")
        data = data.model_copy(update={"domain": domain})

    for key, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(website, key, value)
    website.updated_at = utc_now()
    session.add(website)
    session.commit()
    session.refresh(website)
    return website


def delete_website(session: Session, user_id: int, website_id: int) -> None:
    """
    Delete a website with its chatbots, sessions and messages.

    AEO items are kept; their chat message link is cleared and their
    website reference is left dangling for publish to catch.
    """
    website = get_website(session, user_id, website_id)

    chatbot_ids = list(
        session.exec(select(Chatbot.id).where(Chatbot.website_id == website.id)).all()
    )
    session_ids = []
    if chatbot_ids:
        session_ids = list(
            session.exec(
                select(ChatSession.id).where(ChatSession.chatbot_id.in_(chatbot_ids))
            ).all()
        )

    if session_ids:
        messages = session.exec(
            select(ChatMessage).where(ChatMessage.session_id.in_(session_ids))
        ).all()
        message_ids = [message.id for message in messages]
        for item in session.exec(
            select(AeoContent).where(AeoContent.chat_message_id.in_(message_ids))
        ).all():
            item.chat_message_id = None
            session.add(item)
        session.flush()
        for message in messages:
            session.delete(message)
        session.flush()
        for chat_session in session.exec(
            select(ChatSession).where(ChatSession.id.in_(session_ids))
        ).all():
            session.delete(chat_session)
        session.flush()

    for chatbot in session.exec(select(Chatbot).where(Chatbot.website_id == website.id)).all():
        session.delete(chatbot)
    session.flush()

    session.delete(website)
    session.commit()
    logger.info(f"Deleted website {website_id} for user {user_id}")


# Company profile

def get_company_profile(session: Session, user_id: int) -> CompanyProfile:
    profile = session.exec(
        select(CompanyProfile).where(CompanyProfile.user_id == user_id)
    ).first()
    if not profile:
        raise NotFoundError("Company profile not found")
    return profile


def create_company_profile(
    session: Session, user_id: int, data: CompanyProfileCreate
) -> CompanyProfile:
    existing = session.exec(
        select(CompanyProfile).where(CompanyProfile.user_id == user_id)
    ).first()
    if existing:
        raise ValidationError("Company profile already exists for this user")

    profile = CompanyProfile(user_id=user_id, **data.model_dump())
    session.add(profile)
    session.commit()
    session.refresh(profile)
    return profile


def update_company_profile(
    session: Session, user_id: int, data: CompanyProfileUpdate
) -> CompanyProfile:
    profile = get_company_profile(session, user_id)
    for key, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(profile, key, value)
    profile.updated_at = utc_now()
    session.add(profile)
    session.commit()
    session.refresh(profile)
    return profile


# Chatbots

def get_chatbot(session: Session, user_id: int, chatbot_id: int) -> Chatbot:
    statement = select(Chatbot).where(Chatbot.id == chatbot_id, Chatbot.user_id == user_id)
    chatbot = session.exec(statement).first()
    if not chatbot:
        raise NotFoundError("Chatbot not found")
    return chatbot


def create_chatbot(session: Session, user_id: int, data: ChatbotCreate) -> Chatbot:
    """
    Create the chatbot of an owned website.

    Raises:
        NotFoundError: If the website is missing or not owned
        ValidationError: If the website already has a chatbot
    """
    website = get_website(session, user_id, data.website_id)

    existing = session.exec(select(Chatbot).where(Chatbot.website_id == website.id)).first()
    if existing:
        raise ValidationError("A chatbot already exists for this website")

    values = data.model_dump(exclude_none=True, exclude={"website_id"})
    chatbot = Chatbot(user_id=user_id, website_id=website.id, **values)
    session.add(chatbot)
    session.commit()
    session.refresh(chatbot)
    return chatbot


def update_chatbot(
    session: Session, user_id: int, chatbot_id: int, data: ChatbotUpdate
) -> Chatbot:
    chatbot = get_chatbot(session, user_id, chatbot_id)
    if data.status is not None and data.status not in ("active", "inactive"):
        raise ValidationError("Status must be 'active' or 'inactive'")

    for key, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(chatbot, key, value)
    chatbot.updated_at = utc_now()
    session.add(chatbot)
    session.commit()
    session.refresh(chatbot)
    return chatbot
