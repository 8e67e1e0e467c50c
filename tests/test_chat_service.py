"""Chat pipeline tests: sessions, messages and AEO item filing."""
import pytest
from sqlmodel import select

from answer_engine.core.errors import (
    ConfigurationError,
    InternalError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from answer_engine.models import AeoContent, ChatMessage, Chatbot
from answer_engine.services.chat_service import (
    FALLBACK_REPLY,
    ChatService,
    domain_candidates,
    normalize_domain,
)


def _messages(session, session_id):
    return list(
        session.exec(
            select(ChatMessage)
            .where(ChatMessage.session_id == session_id)
            .order_by(ChatMessage.id)
        ).all()
    )


def _items(session):
    return list(session.exec(select(AeoContent)).all())


def test_create_session_stores_greeting(session, chat_service, owner):
    chat_session, greeting = chat_service.create_session(
        session, owner["chatbot_id"], visitor_id="visitor_1"
    )

    assert chat_session.visitor_id == "visitor_1"
    assert greeting.role == "assistant"
    assert greeting.content == "Hi! Ask me anything about Acme."
    assert [m.id for m in _messages(session, chat_session.id)] == [greeting.id]


def test_create_session_generates_visitor_id(session, chat_service, owner):
    chat_session, _ = chat_service.create_session(session, owner["chatbot_id"])
    assert chat_session.visitor_id.startswith("visitor_")


def test_create_session_default_greeting_names_domain(session, chat_service, make_owner):
    data = make_owner(domain="https://www.acme.test/shop", initial_message=None)

    _, greeting = chat_service.create_session(session, data["chatbot_id"])

    assert greeting.content == "Hi there! How can I help you with information about acme.test?"


def test_create_session_rejects_inactive_chatbot(session, chat_service, owner):
    chatbot = session.get(Chatbot, owner["chatbot_id"])
    chatbot.status = "inactive"
    session.add(chatbot)
    session.commit()

    with pytest.raises(NotFoundError):
        chat_service.create_session(session, owner["chatbot_id"])


def test_create_session_unknown_chatbot(session, chat_service):
    with pytest.raises(NotFoundError):
        chat_service.create_session(session, 999)


def test_post_message_files_pending_item(session, chat_service, responder, owner):
    chat_session, _ = chat_service.create_session(session, owner["chatbot_id"])

    reply, item, error = chat_service.post_message(
        session, chat_session.id, "What are your business hours?"
    )

    assert error is None
    assert reply.role == "assistant"
    assert reply.content == responder.answer

    assert item.status == "pending"
    assert item.added_to_website is False
    assert item.question == "What are your business hours?"
    assert item.answer == responder.answer
    assert item.user_id == owner["user_id"]
    assert item.website_id == owner["website_id"]

    user_msg = session.get(ChatMessage, item.chat_message_id)
    assert user_msg.role == "user"
    assert user_msg.content == "What are your business hours?"

    roles = [m.role for m in _messages(session, chat_session.id)]
    assert roles == ["assistant", "user", "assistant"]
    assert len(_items(session)) == 1


def test_post_message_passes_company_context(session, chat_service, responder, owner):
    chat_session, _ = chat_service.create_session(session, owner["chatbot_id"])

    chat_service.post_message(session, chat_session.id, "Who are you?")

    question, context = responder.calls[0]
    assert question == "Who are you?"
    assert "Company Name: Acme" in context
    assert "Brand Voice: Friendly" in context
    assert "Website: acme.test" in context


@pytest.mark.parametrize(
    "error", [UpstreamError("boom"), ConfigurationError("Missing OPENAI_API_KEY")]
)
def test_post_message_falls_back_on_responder_failure(
    session, chat_service, responder, owner, error
):
    chat_session, _ = chat_service.create_session(session, owner["chatbot_id"])
    responder.error = error

    reply, item, message = chat_service.post_message(session, chat_session.id, "Hello?")

    assert item is None
    assert message == "AI service temporarily unavailable"
    assert reply.role == "assistant"
    assert reply.content == FALLBACK_REPLY
    assert [m.role for m in _messages(session, chat_session.id)] == [
        "assistant",
        "user",
        "assistant",
    ]
    assert _items(session) == []


def test_post_message_falls_back_when_responder_cannot_be_built(session, owner):
    def missing_key():
        raise ConfigurationError("Missing OPENAI_API_KEY")

    service = ChatService(responder_provider=missing_key)
    chat_session, _ = service.create_session(session, owner["chatbot_id"])

    reply, item, _ = service.post_message(session, chat_session.id, "Hello?")

    assert reply.content == FALLBACK_REPLY
    assert item is None


def test_post_message_without_profile_keeps_user_message(
    session, chat_service, responder, make_owner
):
    data = make_owner(with_profile=False)
    chat_session, _ = chat_service.create_session(session, data["chatbot_id"])

    with pytest.raises(InternalError):
        chat_service.post_message(session, chat_session.id, "Anyone there?")

    assert [m.role for m in _messages(session, chat_session.id)] == ["assistant", "user"]
    assert responder.calls == []
    assert _items(session) == []


def test_post_message_unknown_session(session, chat_service):
    with pytest.raises(NotFoundError):
        chat_service.post_message(session, 404, "Hello?")


def test_post_message_requires_text(session, chat_service, owner):
    chat_session, _ = chat_service.create_session(session, owner["chatbot_id"])
    with pytest.raises(ValidationError):
        chat_service.post_message(session, chat_session.id, "   ")


def test_get_messages_in_order(session, chat_service, owner):
    chat_session, _ = chat_service.create_session(session, owner["chatbot_id"])
    chat_service.post_message(session, chat_session.id, "First question")

    messages = chat_service.get_messages(session, chat_session.id)

    assert [m.content for m in messages][:2] == [
        "Hi! Ask me anything about Acme.",
        "First question",
    ]


def test_find_public_chatbot_by_site_id_and_domain(session, chat_service, owner):
    chatbot, website = chat_service.find_public_chatbot(session, site_id=owner["site_id"])
    assert chatbot.id == owner["chatbot_id"]

    chatbot, website = chat_service.find_public_chatbot(session, domain="www.acme.test")
    assert chatbot.id == owner["chatbot_id"]
    assert website.domain == "acme.test"


def test_find_public_chatbot_requires_a_key(session, chat_service):
    with pytest.raises(ValidationError):
        chat_service.find_public_chatbot(session)


def test_find_public_chatbot_unknown_domain(session, chat_service, owner):
    with pytest.raises(NotFoundError):
        chat_service.find_public_chatbot(session, domain="unknown.test")


def test_domain_helpers():
    assert normalize_domain("https://www.Example.com/path") == "Example.com"
    assert domain_candidates("www.example.com") == [
        "example.com",
        "www.example.com",
        "https://example.com",
        "http://example.com",
        "https://www.example.com",
        "http://www.example.com",
    ]
