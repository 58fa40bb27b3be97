from abc import ABC, abstractmethod
from email.message import EmailMessage

import aiosmtplib

from app.core.dto.email import EmailSendResult, OutgoingEmail
from app.infrastructure.config.config import EmailConfig
from app.infrastructure.errors.base import NotificationError
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)


class EmailSender(ABC):

    @abstractmethod
    async def send(self, email: OutgoingEmail) -> EmailSendResult:
        ...


class SmtpEmailSender(EmailSender):
    """Отправка через SMTP-релей провайдера, API-ключ используется как пароль"""

    def __init__(self, config: EmailConfig):
        self.config = config

    def _build_message(self, email: OutgoingEmail) -> EmailMessage:
        message = EmailMessage()
        message["From"] = email.sender
        message["To"] = email.recipient
        message["Subject"] = email.subject
        message.set_content(email.text)
        message.add_alternative(email.html, subtype="html")
        return message

    async def send(self, email: OutgoingEmail) -> EmailSendResult:
        use_tls_direct = bool(self.config.SMTP_USE_TLS) and self.config.SMTP_PORT == 465
        start_tls = bool(self.config.SMTP_USE_TLS) and not use_tls_direct

        try:
            errors, response = await aiosmtplib.send(
                self._build_message(email),
                hostname=self.config.SMTP_HOST,
                port=self.config.SMTP_PORT,
                username=self.config.SMTP_USER,
                password=self.config.EMAIL_API_KEY,
                use_tls=use_tls_direct,
                start_tls=start_tls,
                timeout=self.config.EMAIL_TIMEOUT,
            )
        except Exception as exc:
            raise NotificationError(
                recipient=email.recipient,
                reason=str(exc) or exc.__class__.__name__,
            ) from exc

        if errors:
            raise NotificationError(
                recipient=email.recipient,
                reason="; ".join(f"{address}: {error}" for address, error in errors.items()),
            )

        logger.info(
            "email_sent",
            kind=email.kind.value,
            recipient=email.recipient,
            response=response,
        )
        return EmailSendResult(
            kind=email.kind,
            recipient=email.recipient,
            accepted=True,
            response=response,
        )


class LoggingEmailSender(EmailSender):
    """Заглушка на случай, когда ключ провайдера не задан"""

    async def send(self, email: OutgoingEmail) -> EmailSendResult:
        logger.info(
            "email_send_skipped",
            reason="email_not_configured",
            kind=email.kind.value,
            recipient=email.recipient,
            subject=email.subject,
        )
        return EmailSendResult(
            kind=email.kind,
            recipient=email.recipient,
            accepted=True,
            skipped=True,
            response="skipped: email provider is not configured",
        )


def build_email_sender(config: EmailConfig) -> EmailSender:
    if not config.EMAIL_API_KEY:
        logger.warning(
            "email_sender_degraded",
            reason="EMAIL_API_KEY is not set",
            sender="logging",
        )
        return LoggingEmailSender()

    logger.info(
        "email_sender_configured",
        sender="smtp",
        host=config.SMTP_HOST,
        port=config.SMTP_PORT,
    )
    return SmtpEmailSender(config)
