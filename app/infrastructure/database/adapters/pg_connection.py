from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from app.infrastructure.config.config import DB_CONFIG
from app.infrastructure.database.models.base import Base
from app.infrastructure.errors.base import PersistenceError
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)


class DatabaseConnection:
    def __init__(self, url: str | None = None):
        url = url or DB_CONFIG.get_url()
        if not url:
            logger.warning("database_not_configured", reason="DATABASE_URL is not set")
            self._engine = None
            return

        self._engine = create_async_engine(url=url, **DB_CONFIG.get_engine_options(url))

    @property
    def is_configured(self) -> bool:
        return self._engine is not None

    async def get_session(self) -> AsyncSession:
        if self._engine is None:
            raise PersistenceError()
        return AsyncSession(bind=self._engine, expire_on_commit=False)

    async def create_tables(self) -> None:
        if self._engine is None:
            return
        async with self._engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
