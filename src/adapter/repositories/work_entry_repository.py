"""SQLAlchemy Work Entry Repository Implementation

Append-only ledger persistence.
"""

from datetime import date
from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.work_entry_repository import WorkEntryRepository
from src.domain.work_entry import WorkEntry


class SqlAlchemyWorkEntryRepository(WorkEntryRepository):
    """
    SQLAlchemy implementation of WorkEntryRepository

    Exposes create and read operations only.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: WorkEntry) -> WorkEntry:
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def list_for_period(
        self,
        tenant_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        contractor_id: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[WorkEntry]:
        statement = select(WorkEntry).where(WorkEntry.tenant_id == tenant_id)

        if start_date:
            statement = statement.where(WorkEntry.work_date >= start_date)

        if end_date:
            statement = statement.where(WorkEntry.work_date <= end_date)

        if contractor_id:
            statement = statement.where(WorkEntry.contractor_id == contractor_id)

        statement = statement.order_by(
            WorkEntry.contractor_id, WorkEntry.work_date, WorkEntry.created_at, WorkEntry.id
        )

        if limit is not None:
            statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())
