"""AEO content moderation routes.

Provides:
- GET /api/aeo-content - List the caller's items
- GET /api/aeo-content/{id} - Get one item
- PUT /api/aeo-content/{id} - Edit the answer
- POST /api/aeo-content/{id}/approve - pending -> approved
- POST /api/aeo-content/{id}/reject - pending -> rejected
- POST /api/aeo-content/{id}/publish - approved -> published

Items owned by another user answer 404, same as missing ones.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from answer_engine.core.deps import get_current_user, get_db
from answer_engine.schemas.aeo_content import (
    AeoContentPublished,
    AeoContentRead,
    AeoContentUpdate,
)
from answer_engine.services import aeo_service

router = APIRouter(prefix="/api/aeo-content", tags=["aeo-content"])


@router.get("", response_model=list[AeoContentRead])
def list_aeo_content(
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> list[AeoContentRead]:
    items = aeo_service.list_items(session, current_user_id)
    return [AeoContentRead.from_row(item) for item in items]


@router.get("/{item_id}", response_model=AeoContentRead)
def get_aeo_content(
    item_id: int,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> AeoContentRead:
    return AeoContentRead.from_row(aeo_service.get_item(session, current_user_id, item_id))


@router.put("/{item_id}", response_model=AeoContentRead)
def update_aeo_content(
    item_id: int,
    payload: AeoContentUpdate,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> AeoContentRead:
    item = aeo_service.edit_answer(session, current_user_id, item_id, payload.answer)
    return AeoContentRead.from_row(item)


@router.post("/{item_id}/approve", response_model=AeoContentRead)
def approve_aeo_content(
    item_id: int,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> AeoContentRead:
    return AeoContentRead.from_row(aeo_service.approve(session, current_user_id, item_id))


@router.post("/{item_id}/reject", response_model=AeoContentRead)
def reject_aeo_content(
    item_id: int,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> AeoContentRead:
    return AeoContentRead.from_row(aeo_service.reject(session, current_user_id, item_id))


@router.post("/{item_id}/publish", response_model=AeoContentPublished)
def publish_aeo_content(
    item_id: int,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> AeoContentPublished:
    item = aeo_service.publish(session, current_user_id, item_id)
    return AeoContentPublished.from_row(
        item, message="Content has been published to your website"
    )
