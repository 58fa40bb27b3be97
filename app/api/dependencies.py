from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.config.config import EMAIL_CONFIG, EmailConfig
from app.infrastructure.email.sender import EmailSender
import app.core.repositories as repositories
import app.core.services as services


async def get_db_session(
    request: Request,
) -> AsyncGenerator[AsyncSession | None, None]:
    db_connection = request.app.state.db_connection
    if not db_connection.is_configured:
        yield None
        return

    session = await db_connection.get_session()
    try:
        yield session
    finally:
        await session.close()


async def get_email_sender(request: Request) -> EmailSender:
    return request.app.state.email_sender


async def get_email_config() -> EmailConfig:
    return EMAIL_CONFIG


async def get_contact_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    email_sender: Annotated[EmailSender, Depends(get_email_sender)],
    email_config: Annotated[EmailConfig, Depends(get_email_config)],
) -> services.ContactService:
    return services.ContactService(
        repository=repositories.ContactMessageRepository(session=session),
        email_sender=email_sender,
        email_config=email_config,
    )
