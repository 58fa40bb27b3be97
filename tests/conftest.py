"""
Общие фикстуры: отдельная SQLite-база на каждый тест (aiosqlite) и
записывающий отправитель писем, подключённые через dependency_overrides.
"""

from collections.abc import Iterable

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_db_session, get_email_config, get_email_sender
from app.core.dto.email import EmailSendResult, OutgoingEmail
from app.core.repositories.contact_repository import ContactMessageRepository
from app.infrastructure.config.config import EmailConfig
from app.infrastructure.database.adapters.pg_connection import DatabaseConnection
from app.infrastructure.email.sender import EmailSender
from app.infrastructure.errors.base import NotificationError
from app.main import app
from app.utils.enums import EmailKindEnum, NotificationPolicyEnum


class RecordingEmailSender(EmailSender):
    def __init__(self, fail_kinds: Iterable[EmailKindEnum] = ()):
        self.fail_kinds = set(fail_kinds)
        self.sent: list[OutgoingEmail] = []

    async def send(self, email: OutgoingEmail) -> EmailSendResult:
        self.sent.append(email)
        if email.kind in self.fail_kinds:
            raise NotificationError(recipient=email.recipient, reason="provider unavailable")
        return EmailSendResult(
            kind=email.kind,
            recipient=email.recipient,
            accepted=True,
            response="250 OK",
        )

    @property
    def kinds(self) -> list[EmailKindEnum]:
        return [email.kind for email in self.sent]


def make_email_config(**overrides) -> EmailConfig:
    values = {
        "EMAIL_API_KEY": None,
        "ADMIN_EMAIL": "me@example.com",
        "EMAIL_FROM": None,
        "SENDER_NAME": "Portfolio",
        "NOTIFICATION_POLICY": NotificationPolicyEnum.BEST_EFFORT,
    }
    values.update(overrides)
    return EmailConfig(_env_file=None, **values)


@pytest.fixture
async def db_connection(tmp_path):
    connection = DatabaseConnection(url=f"sqlite+aiosqlite:///{tmp_path / 'contact.db'}")
    await connection.create_tables()
    yield connection
    await connection.dispose()


@pytest.fixture
def email_sender() -> RecordingEmailSender:
    return RecordingEmailSender()


@pytest.fixture
def email_config() -> EmailConfig:
    return make_email_config()


@pytest.fixture
async def client(db_connection, email_sender, email_config):
    async def override_db_session():
        session = await db_connection.get_session()
        try:
            yield session
        finally:
            await session.close()

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_email_sender] = lambda: email_sender
    app.dependency_overrides[get_email_config] = lambda: email_config

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def stored_messages(db_connection):
    async def fetch():
        session = await db_connection.get_session()
        try:
            return await ContactMessageRepository(session).get_all_items()
        finally:
            await session.close()

    return fetch
