"""Campaign CRUD (legacy marketing campaigns shown on the dashboard)."""

from sqlmodel import Session, select

from answer_engine.core.clock import utc_now
from answer_engine.core.errors import NotFoundError
from answer_engine.models.campaign import Campaign
from answer_engine.schemas.campaign import CampaignCreate, CampaignUpdate


def list_campaigns(session: Session, user_id: int) -> list[Campaign]:
    statement = select(Campaign).where(Campaign.user_id == user_id).order_by(Campaign.id)
    return list(session.exec(statement).all())


def get_campaign(session: Session, user_id: int, campaign_id: int) -> Campaign:
    statement = select(Campaign).where(
        Campaign.id == campaign_id,
        Campaign.user_id == user_id,
    )
    campaign = session.exec(statement).first()
    if not campaign:
        raise NotFoundError("Campaign not found")
    return campaign


def create_campaign(session: Session, user_id: int, data: CampaignCreate) -> Campaign:
    campaign = Campaign(user_id=user_id, **data.model_dump())
    session.add(campaign)
    session.commit()
    session.refresh(campaign)
    return campaign


def update_campaign(
    session: Session, user_id: int, campaign_id: int, data: CampaignUpdate
) -> Campaign:
    campaign = get_campaign(session, user_id, campaign_id)
    for key, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(campaign, key, value)
    campaign.updated_at = utc_now()
    session.add(campaign)
    session.commit()
    session.refresh(campaign)
    return campaign


def delete_campaign(session: Session, user_id: int, campaign_id: int) -> None:
    campaign = get_campaign(session, user_id, campaign_id)
    session.delete(campaign)
    session.commit()
