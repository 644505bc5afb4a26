"""SQLAlchemy Statement Repository Implementation

Implements statement persistence using SQLAlchemy async session, with
optional row locking for re-aggregation.
"""

from datetime import datetime
from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.statement_repository import StatementRepository
from src.domain.statement import Statement, StatementStatus


class SqlAlchemyStatementRepository(StatementRepository):
    """
    SQLAlchemy implementation of StatementRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE (ignored by SQLite)
    - Natural-key lookup for idempotent aggregation
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, statement: Statement) -> Statement:
        self.session.add(statement)
        await self.session.flush()
        await self.session.refresh(statement)
        return statement

    async def get_by_id(self, statement_id: str, for_update: bool = False) -> Optional[Statement]:
        stmt = select(Statement).where(Statement.id == statement_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_period(
        self,
        tenant_id: str,
        contractor_id: str,
        year: int,
        week_number: int,
        for_update: bool = False,
    ) -> Optional[Statement]:
        stmt = (
            select(Statement)
            .where(Statement.tenant_id == tenant_id)
            .where(Statement.contractor_id == contractor_id)
            .where(Statement.year == year)
            .where(Statement.week_number == week_number)
        )

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, statement: Statement) -> Statement:
        statement.updated_at = datetime.utcnow()
        self.session.add(statement)
        await self.session.flush()
        await self.session.refresh(statement)
        return statement

    async def list(
        self,
        tenant_id: str,
        contractor_id: Optional[str] = None,
        status: Optional[StatementStatus] = None,
        year: Optional[int] = None,
        week_number: Optional[int] = None,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Statement]:
        stmt = select(Statement).where(Statement.tenant_id == tenant_id)

        if contractor_id:
            stmt = stmt.where(Statement.contractor_id == contractor_id)

        if status:
            stmt = stmt.where(Statement.status == status)

        if year is not None:
            stmt = stmt.where(Statement.year == year)

        if week_number is not None:
            stmt = stmt.where(Statement.week_number == week_number)

        stmt = stmt.order_by(Statement.created_at.desc(), Statement.id)
        stmt = stmt.limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete(self, statement: Statement) -> None:
        await self.session.delete(statement)
        await self.session.flush()
