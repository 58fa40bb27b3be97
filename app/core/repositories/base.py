from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database.models.base import Base
from app.infrastructure.errors.base import PersistenceError


ModelType = TypeVar("ModelType", bound=Base)


class SqlAlchemyRepository(Generic[ModelType]):

    def __init__(self, session: AsyncSession | None, model: type[ModelType]):
        self.session = session
        self.model = model

    async def add_item(self, item: ModelType) -> ModelType:
        if self.session is None:
            raise PersistenceError()
        self.session.add(item)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(item)
        return item

    async def get_all_items(self) -> list[ModelType]:
        result = await self.session.execute(
            select(self.model).order_by(self.model.created_at)
        )
        return list(result.scalars().all())
