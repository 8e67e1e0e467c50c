"""AEO content moderation service.

Items are created by the chat pipeline in ``pending`` and moved by their
owner through a fixed set of transitions:

    pending  -> approved | rejected
    approved -> published

``rejected`` and ``published`` are terminal. Every lookup is scoped to
the caller; an item owned by someone else is reported as not found.
"""
import logging
from typing import Optional

from sqlmodel import Session, select

from answer_engine.core.clock import utc_now
from answer_engine.core.errors import NotFoundError, PreconditionFailedError
from answer_engine.models.aeo_content import AeoContent, AeoStatus
from answer_engine.models.website import Website

logger = logging.getLogger(__name__)

TRANSITIONS: dict[AeoStatus, set[AeoStatus]] = {
    AeoStatus.PENDING: {AeoStatus.APPROVED, AeoStatus.REJECTED},
    AeoStatus.APPROVED: {AeoStatus.PUBLISHED},
    AeoStatus.REJECTED: set(),
    AeoStatus.PUBLISHED: set(),
}


def can_transition(current: str, target: AeoStatus) -> bool:
    return target in TRANSITIONS.get(AeoStatus(current), set())


def create_pending_item(
    session: Session,
    user_id: int,
    website_id: int,
    question: str,
    answer: str,
    chat_message_id: Optional[int] = None,
) -> AeoContent:
    """
    Stage a new item in ``pending``.

    The caller owns the transaction: the item is added and flushed but
    not committed, so it lands together with the assistant reply.
    """
    item = AeoContent(
        chat_message_id=chat_message_id,
        user_id=user_id,
        website_id=website_id,
        question=question,
        answer=answer,
        status=AeoStatus.PENDING.value,
        added_to_website=False,
    )
    session.add(item)
    session.flush()
    return item


def list_items(session: Session, user_id: int) -> list[AeoContent]:
    statement = (
        select(AeoContent)
        .where(AeoContent.user_id == user_id)
        .order_by(AeoContent.created_at, AeoContent.id)
    )
    return list(session.exec(statement).all())


def get_item(session: Session, user_id: int, item_id: int) -> AeoContent:
    """
    Get an item owned by ``user_id``.

    Raises:
        NotFoundError: If the item does not exist or belongs to another user
    """
    statement = select(AeoContent).where(
        AeoContent.id == item_id,
        AeoContent.user_id == user_id,
    )
    item = session.exec(statement).first()
    if not item:
        logger.warning(f"AEO content {item_id} not found for user {user_id}")
        raise NotFoundError("AEO content not found")
    return item


def edit_answer(
    session: Session, user_id: int, item_id: int, answer: Optional[str]
) -> AeoContent:
    """Replace the answer text. Status is left as is; an empty answer keeps the old one."""
    item = get_item(session, user_id, item_id)
    if answer:
        item.answer = answer
    item.updated_at = utc_now()
    return _save(session, item)


def approve(session: Session, user_id: int, item_id: int) -> AeoContent:
    return _transition(session, user_id, item_id, AeoStatus.APPROVED)


def reject(session: Session, user_id: int, item_id: int) -> AeoContent:
    return _transition(session, user_id, item_id, AeoStatus.REJECTED)


def publish(session: Session, user_id: int, item_id: int) -> AeoContent:
    """
    Publish an approved item to its website.

    Raises:
        NotFoundError: If the item is missing/not owned, or its website
            no longer exists
        PreconditionFailedError: If the item is not ``approved``
    """
    item = get_item(session, user_id, item_id)
    if not can_transition(item.status, AeoStatus.PUBLISHED):
        raise PreconditionFailedError("Content not found or not in an approved state")

    website = session.get(Website, item.website_id)
    if not website:
        logger.warning(f"Website {item.website_id} missing for AEO content {item_id}")
        raise NotFoundError("Associated website not found")

    item.status = AeoStatus.PUBLISHED.value
    item.added_to_website = True
    item.updated_at = utc_now()
    item = _save(session, item)

    logger.info(f"AEO content {item_id} published to website {website.domain}")
    return item


def _transition(
    session: Session, user_id: int, item_id: int, target: AeoStatus
) -> AeoContent:
    item = get_item(session, user_id, item_id)
    if not can_transition(item.status, target):
        raise PreconditionFailedError(
            f"AEO content cannot move from {item.status} to {target.value}"
        )

    item.status = target.value
    item.updated_at = utc_now()
    item = _save(session, item)

    logger.info(f"AEO content {item_id} {target.value} by user {user_id}")
    return item


def _save(session: Session, item: AeoContent) -> AeoContent:
    session.add(item)
    session.commit()
    session.refresh(item)
    return item
