"""Dashboard routes for websites, the company profile and chatbots."""
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from answer_engine.core.deps import get_current_user, get_db
from answer_engine.schemas.website import (
    ChatbotCreate,
    ChatbotRead,
    ChatbotUpdate,
    CompanyProfileCreate,
    CompanyProfileRead,
    CompanyProfileUpdate,
    WebsiteCreate,
    WebsiteRead,
    WebsiteUpdate,
)
from answer_engine.services import website_service

router = APIRouter(prefix="/api", tags=["websites"])


@router.get("/websites", response_model=list[WebsiteRead])
def list_websites(
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> list[WebsiteRead]:
    websites = website_service.list_websites(session, current_user_id)
    return [WebsiteRead.from_row(website) for website in websites]


@router.post("/websites", response_model=WebsiteRead, status_code=status.HTTP_201_CREATED)
def create_website(
    payload: WebsiteCreate,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> WebsiteRead:
    """Connect a website; a default active chatbot is created with it."""
    website = website_service.create_website(session, current_user_id, payload)
    return WebsiteRead.from_row(website)


@router.get("/websites/{website_id}", response_model=WebsiteRead)
def get_website(
    website_id: int,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> WebsiteRead:
    return WebsiteRead.from_row(website_service.get_website(session, current_user_id, website_id))


@router.put("/websites/{website_id}", response_model=WebsiteRead)
def update_website(
    website_id: int,
    payload: WebsiteUpdate,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> WebsiteRead:
    website = website_service.update_website(session, current_user_id, website_id, payload)
    return WebsiteRead.from_row(website)


@router.delete("/websites/{website_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_website(
    website_id: int,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> Response:
    website_service.delete_website(session, current_user_id, website_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/company/profile", response_model=CompanyProfileRead)
def get_company_profile(
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> CompanyProfileRead:
    return CompanyProfileRead.from_row(
        website_service.get_company_profile(session, current_user_id)
    )


@router.post(
    "/company/profile",
    response_model=CompanyProfileRead,
    status_code=status.HTTP_201_CREATED,
)
def create_company_profile(
    payload: CompanyProfileCreate,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> CompanyProfileRead:
    profile = website_service.create_company_profile(session, current_user_id, payload)
    return CompanyProfileRead.from_row(profile)


@router.put("/company/profile", response_model=CompanyProfileRead)
def update_company_profile(
    payload: CompanyProfileUpdate,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> CompanyProfileRead:
    profile = website_service.update_company_profile(session, current_user_id, payload)
    return CompanyProfileRead.from_row(profile)


@router.post("/chatbots", response_model=ChatbotRead, status_code=status.HTTP_201_CREATED)
def create_chatbot(
    payload: ChatbotCreate,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> ChatbotRead:
    chatbot = website_service.create_chatbot(session, current_user_id, payload)
    return ChatbotRead.from_row(chatbot)


@router.get("/chatbots/{chatbot_id}", response_model=ChatbotRead)
def get_chatbot(
    chatbot_id: int,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> ChatbotRead:
    return ChatbotRead.from_row(website_service.get_chatbot(session, current_user_id, chatbot_id))


@router.put("/chatbots/{chatbot_id}", response_model=ChatbotRead)
def update_chatbot(
    chatbot_id: int,
    payload: ChatbotUpdate,
    current_user_id: int = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> ChatbotRead:
    chatbot = website_service.update_chatbot(session, current_user_id, chatbot_id, payload)
    return ChatbotRead.from_row(chatbot)
