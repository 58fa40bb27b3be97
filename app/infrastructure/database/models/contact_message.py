from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.models.base import Base


DEFAULT_CONTACT_TYPE = "General Inquiry"


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    name: Mapped[str]
    email: Mapped[str]
    type: Mapped[str] = mapped_column(default=DEFAULT_CONTACT_TYPE)
    message: Mapped[str] = mapped_column(Text)

    # зарезервировано под будущую админку
    read: Mapped[bool] = mapped_column(default=False)

    def __repr__(self):
        return f"<ContactMessage(name='{self.name}', email='{self.email}', type='{self.type}')>"
