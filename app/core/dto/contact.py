from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class ContactCreateModel(BaseModel):
    name: str | None = Field(None, max_length=200)
    email: str | None = Field(None, max_length=320)
    message: str | None = Field(None, max_length=10000)
    type: str | None = Field(None, max_length=100)


class ContactMessageModel(BaseModel):
    id: UUID
    name: str
    email: str
    type: str
    message: str
    read: bool
    created_at: datetime


class MessageResponseModel(BaseModel):
    message: str


class SendCheckResponseModel(BaseModel):
    ok: bool
    response: dict | None = None
    error: str | None = None
