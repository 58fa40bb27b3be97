from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_email_config, get_email_sender
from app.core.dto.contact import SendCheckResponseModel
from app.infrastructure.config.config import EmailConfig
from app.infrastructure.email.messages import build_test_email
from app.infrastructure.email.sender import EmailSender
from app.infrastructure.errors.base import NotificationError
from app.infrastructure.logging import get_logger


router = APIRouter()
logger = get_logger(__name__)


@router.get(
    "/test-send",
    response_model=SendCheckResponseModel,
    response_model_exclude_none=True,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": SendCheckResponseModel}},
    summary="Send a test email",
    description="Sends a test email to ADMIN_EMAIL through the configured sender",
)
async def send_test_email(
    email_sender: Annotated[EmailSender, Depends(get_email_sender)],
    email_config: Annotated[EmailConfig, Depends(get_email_config)],
):
    if not email_config.admin_email:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"ok": False, "error": "ADMIN_EMAIL is not configured"},
        )

    try:
        result = await email_sender.send(build_test_email(email_config))
    except NotificationError as exc:
        logger.error("test_email_failed", recipient=exc.recipient, error=exc.reason)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"ok": False, "error": exc.reason},
        )
    return SendCheckResponseModel(ok=True, response=result.model_dump(mode="json"))
