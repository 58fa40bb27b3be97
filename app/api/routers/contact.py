from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_contact_service
from app.core.dto.contact import ContactCreateModel, MessageResponseModel
from app.core.services.contact_service import ContactService
from app.infrastructure.errors.base import NotificationError, PersistenceError, ValidationError
from app.utils.error_extra import error_response


router = APIRouter()


@router.post(
    "",
    response_model=MessageResponseModel,
    status_code=status.HTTP_200_OK,
    responses={**error_response(ValidationError, PersistenceError, NotificationError)},
    summary="Submit the contact form",
    description="Saves the message and notifies the site owner and the sender by email",
)
async def submit_contact(
    data: ContactCreateModel,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> MessageResponseModel:
    return await service.submit_contact(data)
