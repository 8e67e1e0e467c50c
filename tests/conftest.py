from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import answer_engine.models  # noqa: F401
from answer_engine.core.deps import get_chat_service, get_db
from answer_engine.core.security import create_access_token
from answer_engine.main import app
from answer_engine.models import Chatbot, CompanyProfile, User, Website
from answer_engine.services.chat_service import ChatService


class FakeResponder:
    """Stands in for LLMResponder; records calls and returns a canned answer."""

    def __init__(self, answer: str = "Acme is open 9am-5pm, Monday through Friday."):
        self.answer = answer
        self.error: Optional[Exception] = None
        self.calls: list[tuple[str, str]] = []

    def respond(self, question: str, context: str) -> str:
        self.calls.append((question, context))
        if self.error:
            raise self.error
        return self.answer


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def responder():
    return FakeResponder()


@pytest.fixture
def chat_service(responder):
    return ChatService(responder_provider=lambda: responder)


@pytest.fixture
def client(session, chat_service):
    app.dependency_overrides[get_db] = lambda: session
    app.dependency_overrides[get_chat_service] = lambda: chat_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_owner(session):
    """Create a user with a website, an active chatbot and optionally a company profile."""

    def _make_owner(
        email: str = "owner@acme.test",
        domain: str = "acme.test",
        company_name: str = "Acme",
        with_profile: bool = True,
        initial_message: Optional[str] = "Hi! Ask me anything about Acme.",
    ) -> dict:
        user = User(email=email)
        session.add(user)
        session.commit()
        session.refresh(user)

        website = Website(user_id=user.id, domain=domain, site_id=f"site_{user.id:012x}")
        session.add(website)
        session.commit()
        session.refresh(website)

        chatbot = Chatbot(
            user_id=user.id,
            website_id=website.id,
            name=f"{domain} Chatbot",
            initial_message=initial_message,
        )
        session.add(chatbot)

        if with_profile:
            session.add(
                CompanyProfile(
                    user_id=user.id,
                    company_name=company_name,
                    industry="Hardware",
                    target_audience="Small businesses",
                    brand_voice="Friendly",
                    services="Anvils and rockets",
                    value_proposition="Reliable gear since 1949",
                )
            )
        session.commit()
        session.refresh(chatbot)

        return {
            "user_id": user.id,
            "website_id": website.id,
            "site_id": website.site_id,
            "chatbot_id": chatbot.id,
            "headers": {"Authorization": f"Bearer {create_access_token(user.id)}"},
        }

    return _make_owner


@pytest.fixture
def owner(make_owner):
    return make_owner()
