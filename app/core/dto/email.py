from pydantic import BaseModel

from app.utils.enums import EmailKindEnum


class OutgoingEmail(BaseModel):
    kind: EmailKindEnum
    sender: str
    recipient: str
    subject: str
    text: str
    html: str


class EmailSendResult(BaseModel):
    kind: EmailKindEnum
    recipient: str
    accepted: bool
    skipped: bool = False
    response: str | None = None
