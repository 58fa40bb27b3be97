import asyncio

from sqlalchemy.exc import SQLAlchemyError

from app.core.dto.contact import ContactCreateModel, ContactMessageModel, MessageResponseModel
from app.core.dto.email import EmailSendResult, OutgoingEmail
from app.core.repositories.contact_repository import ContactMessageRepository
from app.infrastructure.config.config import EmailConfig
from app.infrastructure.database.models.contact_message import DEFAULT_CONTACT_TYPE, ContactMessage
from app.infrastructure.email.messages import build_admin_notification, build_confirmation
from app.infrastructure.email.sender import EmailSender
from app.infrastructure.errors.base import NotificationError, PersistenceError, ValidationError
from app.infrastructure.logging import get_logger
from app.utils.enums import NotificationPolicyEnum


logger = get_logger(__name__)

SUCCESS_MESSAGE = "Message sent successfully!"
PARTIAL_SUCCESS_MESSAGE = "Message received, but some notification emails could not be sent."


class ContactService:

    def __init__(
        self,
        repository: ContactMessageRepository,
        email_sender: EmailSender,
        email_config: EmailConfig,
    ):
        self.repository = repository
        self.email_sender = email_sender
        self.email_config = email_config

    async def submit_contact(self, data: ContactCreateModel) -> MessageResponseModel:
        name, email, message = self._validate(data)
        contact_type = (data.type or "").strip() or DEFAULT_CONTACT_TYPE

        contact = await self._save(
            ContactMessage(
                name=name,
                email=email,
                type=contact_type,
                message=message,
            )
        )

        failures = await self._notify(contact)
        if not failures:
            return MessageResponseModel(message=SUCCESS_MESSAGE)

        if self.email_config.NOTIFICATION_POLICY == NotificationPolicyEnum.FAIL_TOGETHER:
            raise NotificationError(
                recipient=", ".join(failure.recipient or "" for failure in failures),
                reason="; ".join(failure.reason or "" for failure in failures),
            )
        return MessageResponseModel(message=PARTIAL_SUCCESS_MESSAGE)

    @staticmethod
    def _validate(data: ContactCreateModel) -> tuple[str, str, str]:
        name = (data.name or "").strip()
        email = (data.email or "").strip()
        message = (data.message or "").strip()

        if not name or not email or not message:
            logger.info(
                "contact_validation_failed",
                has_name=bool(name),
                has_email=bool(email),
                has_message=bool(message),
            )
            raise ValidationError()
        return name, email, message

    async def _save(self, contact: ContactMessage) -> ContactMessageModel:
        try:
            created = await self.repository.add_item(contact)
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as exc:
            logger.error("contact_message_save_failed", error=str(exc), exc_info=True)
            raise PersistenceError() from exc

        contact_model = ContactMessageModel.model_validate(created, from_attributes=True)
        logger.info(
            "contact_message_saved",
            contact_id=str(contact_model.id),
            type=contact_model.type,
        )
        return contact_model

    async def _notify(self, contact: ContactMessageModel) -> list[NotificationError]:
        emails: list[OutgoingEmail] = []

        if self.email_config.admin_email:
            emails.append(build_admin_notification(self.email_config, contact))
        else:
            logger.warning(
                "admin_notification_skipped",
                reason="ADMIN_EMAIL is not set",
                contact_id=str(contact.id),
            )
        emails.append(build_confirmation(self.email_config, contact))

        results = await asyncio.gather(
            *(self.email_sender.send(email) for email in emails),
            return_exceptions=True,
        )

        failures: list[NotificationError] = []
        for email, result in zip(emails, results):
            if isinstance(result, EmailSendResult):
                continue

            failure = (
                result
                if isinstance(result, NotificationError)
                else NotificationError(recipient=email.recipient, reason=repr(result))
            )
            logger.error(
                "contact_email_failed",
                kind=email.kind.value,
                recipient=email.recipient,
                error=failure.reason,
                contact_id=str(contact.id),
            )
            failures.append(failure)
        return failures
