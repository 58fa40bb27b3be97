from sqlalchemy.ext.asyncio import AsyncSession

from app.core.repositories.base import SqlAlchemyRepository
from app.infrastructure.database.models.contact_message import ContactMessage


class ContactMessageRepository(SqlAlchemyRepository[ContactMessage]):

    def __init__(self, session: AsyncSession | None):
        super().__init__(session, ContactMessage)
