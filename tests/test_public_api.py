"""Public widget endpoint tests."""
from answer_engine.core.errors import UpstreamError
from answer_engine.services.chat_service import FALLBACK_REPLY


def _open_session(client, owner, **extra):
    body = {"chatbotId": owner["chatbot_id"], "visitorId": "visitor_1", **extra}
    response = client.post("/api/public/chat-sessions", json=body)
    assert response.status_code == 201
    return response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_chatbot_config_by_domain(client, owner):
    response = client.get("/api/public/chatbot", params={"domain": "www.acme.test"})

    assert response.status_code == 200
    assert response.json() == {
        "id": owner["chatbot_id"],
        "name": "acme.test Chatbot",
        "primaryColor": "#4f46e5",
        "position": "bottom-right",
        "initialMessage": "Hi! Ask me anything about Acme.",
        "collectEmail": True,
        "websiteDomain": "acme.test",
    }


def test_chatbot_config_by_site_id(client, owner):
    response = client.get("/api/public/chatbot", params={"siteId": owner["site_id"]})
    assert response.status_code == 200
    assert response.json()["id"] == owner["chatbot_id"]


def test_chatbot_config_missing(client, owner):
    response = client.get("/api/public/chatbot", params={"domain": "nobody.test"})
    assert response.status_code == 404
    assert "message" in response.json()


def test_chatbot_config_requires_parameter(client):
    response = client.get("/api/public/chatbot")
    assert response.status_code == 400


def test_create_session_returns_greeting(client, owner):
    data = _open_session(client, owner, visitorEmail="v@example.test", url="https://acme.test/")

    assert data["chatbotId"] == owner["chatbot_id"]
    assert data["visitorId"] == "visitor_1"
    assert data["visitorEmail"] == "v@example.test"
    assert data["metadata"]["url"] == "https://acme.test/"
    assert data["message"]["role"] == "assistant"
    assert data["message"]["content"] == "Hi! Ask me anything about Acme."


def test_create_session_unknown_chatbot(client):
    response = client.post("/api/public/chat-sessions", json={"chatbotId": 999, "visitorId": "v"})
    assert response.status_code == 404


def test_create_session_requires_chatbot_id(client):
    response = client.post("/api/public/chat-sessions", json={"visitorId": "v"})
    assert response.status_code == 400
    assert response.json()["message"] == "Validation error"


def test_send_message_creates_aeo_item(client, owner, responder):
    chat_session = _open_session(client, owner)

    response = client.post(
        f"/api/public/chat-sessions/{chat_session['id']}/messages",
        json={"message": "What are your business hours?"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["session"] == chat_session["id"]
    assert data["message"]["role"] == "assistant"
    assert data["message"]["content"] == responder.answer
    assert data.get("error") is None

    items = client.get("/api/aeo-content", headers=owner["headers"]).json()
    assert len(items) == 1
    assert items[0]["question"] == "What are your business hours?"
    assert items[0]["answer"] == responder.answer
    assert items[0]["status"] == "pending"
    assert items[0]["addedToWebsite"] is False


def test_send_message_llm_failure_still_200(client, owner, responder):
    chat_session = _open_session(client, owner)
    responder.error = UpstreamError("provider down")

    response = client.post(
        f"/api/public/chat-sessions/{chat_session['id']}/messages",
        json={"message": "Hello?"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"]["content"] == FALLBACK_REPLY
    assert data["error"] == "AI service temporarily unavailable"
    assert client.get("/api/aeo-content", headers=owner["headers"]).json() == []


def test_send_message_requires_message(client, owner):
    chat_session = _open_session(client, owner)
    response = client.post(
        f"/api/public/chat-sessions/{chat_session['id']}/messages", json={}
    )
    assert response.status_code == 400


def test_send_message_unknown_session(client):
    response = client.post("/api/public/chat-sessions/999/messages", json={"message": "Hi"})
    assert response.status_code == 404


def test_send_message_without_company_profile(client, make_owner):
    data = make_owner(with_profile=False)
    chat_session = _open_session(client, data)

    response = client.post(
        f"/api/public/chat-sessions/{chat_session['id']}/messages",
        json={"message": "Hi"},
    )

    assert response.status_code == 500
    assert response.json() == {"message": "Company information not found"}


def test_message_history(client, owner):
    chat_session = _open_session(client, owner)
    client.post(
        f"/api/public/chat-sessions/{chat_session['id']}/messages",
        json={"message": "Do you ship abroad?"},
    )

    response = client.get(f"/api/public/chat-sessions/{chat_session['id']}/messages")

    assert response.status_code == 200
    assert [m["role"] for m in response.json()] == ["assistant", "user", "assistant"]


def test_message_history_unknown_session(client):
    assert client.get("/api/public/chat-sessions/999/messages").status_code == 404
