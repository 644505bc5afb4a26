"""SQLAlchemy Unit of Work

Wraps the request-scoped AsyncSession. Repositories only flush; this is
the single place where a billing transaction is committed or abandoned.
"""

import logging
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        if self.session.in_transaction():
            logger.debug("Rolling back billing transaction")
        # Expires loaded instances; callers re-read before touching them again
        await self.session.rollback()
