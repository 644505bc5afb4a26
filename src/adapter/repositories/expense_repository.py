"""SQLAlchemy Expense Repository Implementation"""

from datetime import date
from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.expense_repository import ExpenseRepository
from src.domain.expense import Expense


class SqlAlchemyExpenseRepository(ExpenseRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, expense: Expense) -> Expense:
        self.session.add(expense)
        await self.session.flush()
        await self.session.refresh(expense)
        return expense

    async def get_by_id(self, expense_id: str) -> Optional[Expense]:
        statement = select(Expense).where(Expense.id == expense_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(
        self,
        tenant_id: str,
        contractor_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Expense]:
        statement = select(Expense).where(Expense.tenant_id == tenant_id)

        if contractor_id:
            statement = statement.where(Expense.contractor_id == contractor_id)

        if start_date:
            statement = statement.where(Expense.expense_date >= start_date)

        if end_date:
            statement = statement.where(Expense.expense_date <= end_date)

        statement = statement.order_by(
            Expense.expense_date.desc(), Expense.created_at.desc(), Expense.id
        )

        if limit is not None:
            statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def delete(self, expense: Expense) -> None:
        await self.session.delete(expense)
        await self.session.flush()
