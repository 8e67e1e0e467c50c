"""FastAPI dependencies: database session, caller identity, services."""
from functools import lru_cache
import logging
from typing import Iterator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from answer_engine.core.errors import AuthenticationError
from answer_engine.core.security import decode_access_token
from answer_engine.database import get_session
from answer_engine.models.user import User
from answer_engine.services.chat_service import ChatService
from answer_engine.services.llm_responder import LLMResponder

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Iterator[Session]:
    yield from get_session()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    session: Session = Depends(get_db),
) -> int:
    """
    Resolve the caller's user id from the bearer token.

    Raises:
        AuthenticationError: If the token is missing, invalid, expired,
            or names a user that does not exist
    """
    if credentials is None:
        raise AuthenticationError()

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise AuthenticationError("Invalid or expired token")

    if not session.get(User, user_id):
        logger.warning(f"Token presented for unknown user {user_id}")
        raise AuthenticationError("Invalid or expired token")

    return user_id


@lru_cache
def get_llm_responder() -> LLMResponder:
    """Build the responder once; a missing API key raises on every attempt until fixed."""
    return LLMResponder.from_settings()


def get_chat_service() -> ChatService:
    return ChatService(responder_provider=get_llm_responder)
