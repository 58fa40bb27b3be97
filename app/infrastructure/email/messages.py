from pathlib import Path

from app.core.dto.contact import ContactMessageModel
from app.core.dto.email import OutgoingEmail
from app.infrastructure.config.config import EmailConfig
from app.utils.enums import EmailKindEnum
from app.utils.escaping import escape_html, escape_multiline


TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
ADMIN_TEMPLATE_PATH = TEMPLATES_DIR / "admin_notification.html"
CONFIRMATION_TEMPLATE_PATH = TEMPLATES_DIR / "confirmation.html"

FALLBACK_SENDER_DOMAIN = "resend.dev"


def derive_sender_domain(admin_email: str | None) -> str:
    """Домен для адреса отправителя берётся из ADMIN_EMAIL, иначе заглушка"""
    if not admin_email or admin_email.count("@") != 1:
        return FALLBACK_SENDER_DOMAIN

    domain = admin_email.strip().split("@")[1]
    return domain or FALLBACK_SENDER_DOMAIN


def build_from_address(config: EmailConfig) -> str:
    if config.EMAIL_FROM:
        return config.EMAIL_FROM
    domain = derive_sender_domain(config.admin_email)
    return f"{config.SENDER_NAME} <no-reply@{domain}>"


def build_admin_notification(
    config: EmailConfig,
    contact: ContactMessageModel,
) -> OutgoingEmail:
    template = ADMIN_TEMPLATE_PATH.read_text(encoding="utf-8")
    return OutgoingEmail(
        kind=EmailKindEnum.ADMIN_NOTIFICATION,
        sender=build_from_address(config),
        recipient=config.admin_email,
        subject=f"New Contact Form Submission - {contact.type}",
        text="\n".join(
            [
                f"{contact.name} sent a message.",
                f"Email: {contact.email}",
                f"Type: {contact.type}",
                f"Received: {contact.created_at}",
                "",
                contact.message,
            ]
        ),
        html=template.format(
            name=escape_html(contact.name),
            email=escape_html(contact.email),
            type=escape_html(contact.type),
            created_at=escape_html(contact.created_at.isoformat()),
            message=escape_multiline(contact.message),
        ),
    )


def build_confirmation(
    config: EmailConfig,
    contact: ContactMessageModel,
) -> OutgoingEmail:
    template = CONFIRMATION_TEMPLATE_PATH.read_text(encoding="utf-8")
    return OutgoingEmail(
        kind=EmailKindEnum.CONFIRMATION,
        sender=build_from_address(config),
        recipient=contact.email,
        subject="We received your message!",
        text="\n".join(
            [
                f"Hi {contact.name},",
                "",
                "Thank you for contacting me. I have received your message "
                "and will get back to you shortly.",
                "",
                "Your message:",
                contact.message,
                "",
                f"- {config.SENDER_NAME}",
            ]
        ),
        html=template.format(
            name=escape_html(contact.name),
            message=escape_multiline(contact.message),
            sender_name=escape_html(config.SENDER_NAME),
        ),
    )


def build_test_email(config: EmailConfig) -> OutgoingEmail:
    return OutgoingEmail(
        kind=EmailKindEnum.TEST,
        sender=build_from_address(config),
        recipient=config.admin_email,
        subject="Test email from the portfolio backend",
        text="If you can read this, outbound email is configured correctly.",
        html="<p>If you can read this, outbound email is configured correctly.</p>",
    )
