"""Legacy campaign routes kept for the dashboard's campaign table."""
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from answer_engine.core.deps import get_current_user, get_db
from answer_engine.schemas.campaign import CampaignCreate, CampaignRead, CampaignUpdate
from answer_engine.services import campaign_service

router = APIRouter(prefix="/api/campaigns", tags=["campaigns"])


@router.get("", response_model=list[CampaignRead])
def list_campaigns(
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> list[CampaignRead]:
    campaigns = campaign_service.list_campaigns(session, current_user_id)
    return [CampaignRead.from_row(campaign) for campaign in campaigns]


@router.post("", response_model=CampaignRead, status_code=status.HTTP_201_CREATED)
def create_campaign(
    payload: CampaignCreate,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> CampaignRead:
    return CampaignRead.from_row(campaign_service.create_campaign(session, current_user_id, payload))


@router.get("/{campaign_id}", response_model=CampaignRead)
def get_campaign(
    campaign_id: int,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> CampaignRead:
    return CampaignRead.from_row(campaign_service.get_campaign(session, current_user_id, campaign_id))


@router.put("/{campaign_id}", response_model=CampaignRead)
def update_campaign(
    campaign_id: int,
    payload: CampaignUpdate,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> CampaignRead:
    campaign = campaign_service.update_campaign(session, current_user_id, campaign_id, payload)
    return CampaignRead.from_row(campaign)


@router.delete("/{campaign_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_campaign(
    campaign_id: int,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> Response:
    campaign_service.delete_campaign(session, current_user_id, campaign_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
