import pytest

from app.api.dependencies import get_db_session
from app.main import app
from app.utils.enums import EmailKindEnum, NotificationPolicyEnum
from tests.conftest import RecordingEmailSender, make_email_config


ADA = {"name": "Ada", "email": "ada@example.com", "message": "Hello"}


async def test_contact_submission_saves_message_and_sends_both_emails(
    client, email_sender, stored_messages
):
    response = await client.post("/api/contact", json=ADA)

    assert response.status_code == 200
    assert response.json() == {"message": "Message sent successfully!"}

    messages = await stored_messages()
    assert len(messages) == 1
    saved = messages[0]
    assert saved.name == "Ada"
    assert saved.email == "ada@example.com"
    assert saved.message == "Hello"
    assert saved.type == "General Inquiry"
    assert saved.read is False
    assert saved.created_at is not None

    assert sorted(email_sender.kinds) == sorted(
        [EmailKindEnum.ADMIN_NOTIFICATION, EmailKindEnum.CONFIRMATION]
    )
    recipients = {email.kind: email.recipient for email in email_sender.sent}
    assert recipients[EmailKindEnum.ADMIN_NOTIFICATION] == "me@example.com"
    assert recipients[EmailKindEnum.CONFIRMATION] == "ada@example.com"


async def test_contact_submission_keeps_given_type(client, stored_messages):
    response = await client.post("/api/contact", json={**ADA, "type": "Freelance Project"})

    assert response.status_code == 200
    messages = await stored_messages()
    assert messages[0].type == "Freelance Project"


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "ada@example.com", "message": "Hello"},
        {"name": "Ada", "message": "Hello"},
        {"name": "Ada", "email": "ada@example.com"},
        {"name": "", "email": "ada@example.com", "message": "Hello"},
        {"name": "Ada", "email": "ada@example.com", "message": "   "},
        {},
    ],
)
async def test_contact_submission_requires_all_fields(
    client, email_sender, stored_messages, payload
):
    response = await client.post("/api/contact", json=payload)

    assert response.status_code == 400
    assert response.json() == {"message": "All fields are required"}
    assert await stored_messages() == []
    assert email_sender.sent == []


async def test_contact_submission_rejects_malformed_body(client, stored_messages):
    response = await client.post(
        "/api/contact",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "message" in response.json()
    assert await stored_messages() == []


async def test_email_failure_is_best_effort(client, email_sender, stored_messages):
    email_sender.fail_kinds = {EmailKindEnum.ADMIN_NOTIFICATION, EmailKindEnum.CONFIRMATION}

    response = await client.post("/api/contact", json=ADA)

    assert response.status_code == 200
    assert response.json() == {
        "message": "Message received, but some notification emails could not be sent."
    }
    assert len(await stored_messages()) == 1
    assert len(email_sender.sent) == 2


async def test_email_failure_with_fail_together_policy(client, email_sender, email_config, stored_messages):
    email_config.NOTIFICATION_POLICY = NotificationPolicyEnum.FAIL_TOGETHER
    email_sender.fail_kinds = {EmailKindEnum.CONFIRMATION}

    response = await client.post("/api/contact", json=ADA)

    assert response.status_code == 500
    assert response.json() == {
        "message": "Message saved, but notification emails could not be sent."
    }
    # запись не откатывается
    assert len(await stored_messages()) == 1


async def test_admin_email_is_skipped_when_not_configured(client, email_sender, email_config):
    email_config.ADMIN_EMAIL = None

    response = await client.post("/api/contact", json=ADA)

    assert response.status_code == 200
    assert email_sender.kinds == [EmailKindEnum.CONFIRMATION]


async def test_submitted_markup_is_escaped_in_emails(client, email_sender):
    response = await client.post(
        "/api/contact",
        json={**ADA, "message": "<script>alert(1)</script>"},
    )

    assert response.status_code == 200
    for email in email_sender.sent:
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in email.html
        assert "<script>" not in email.html


async def test_persistence_failure_skips_emails(client, email_sender):
    async def unconfigured_session():
        yield None

    app.dependency_overrides[get_db_session] = unconfigured_session

    response = await client.post("/api/contact", json=ADA)

    assert response.status_code == 500
    assert response.json() == {"message": "Internal Server Error: Failed to save message."}
    assert email_sender.sent == []


async def test_test_send_uses_configured_sender(client, email_sender):
    response = await client.get("/api/test-send")

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["response"]["recipient"] == "me@example.com"
    assert email_sender.kinds == [EmailKindEnum.TEST]


async def test_test_send_reports_failure(client, email_sender):
    email_sender.fail_kinds = {EmailKindEnum.TEST}

    response = await client.get("/api/test-send")

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "provider unavailable"}


async def test_test_send_without_admin_email(client, email_config):
    email_config.ADMIN_EMAIL = ""

    response = await client.get("/api/test-send")

    assert response.status_code == 500
    assert response.json()["ok"] is False


async def test_root_reports_liveness(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.text == "Backend is running!"
    assert response.headers["content-type"].startswith("text/plain")
